"""
Star and element tables for Xuan Kong analysis.
Classical Lo Shu assignments and display vocabularies.
"""

from xuankong.core_types import DirectionKind, Element, Phase

# Lo Shu number -> element (Ngũ Hành)
ELEMENT_BY_STAR: dict[int, Element] = {
    1: Element.WATER,
    2: Element.EARTH,
    3: Element.WOOD,
    4: Element.WOOD,
    5: Element.EARTH,
    6: Element.METAL,
    7: Element.METAL,
    8: Element.EARTH,
    9: Element.FIRE,
}

# Generating cycle (Tương Sinh): key generates value
GENERATES: dict[Element, Element] = {
    Element.WOOD: Element.FIRE,
    Element.FIRE: Element.EARTH,
    Element.EARTH: Element.METAL,
    Element.METAL: Element.WATER,
    Element.WATER: Element.WOOD,
}

# Controlling cycle (Tương Khắc): key controls value
CONTROLS: dict[Element, Element] = {
    Element.WOOD: Element.EARTH,
    Element.EARTH: Element.WATER,
    Element.WATER: Element.FIRE,
    Element.FIRE: Element.METAL,
    Element.METAL: Element.WOOD,
}

# Son/Huong star combinations, keyed "min-max"
PAIR_LABELS: dict[str, str] = {
    "2-3": "Đấu Ngưu Sát (khẩu thiệt, kiện tụng)",
    "6-7": "Thương/Giao Kiếm Sát (tai nạn, trộm cướp)",
    "3-7": "Xuyên Tâm Sát (cãi cọ, kiện tụng)",
    "1-6": "Thủy Tiên Thiên (tài lộc)",
    "2-7": "Hỏa Tiên Thiên (bệnh tật)",
    "4-9": "Kim Tiên Thiên (công danh)",
    "3-8": "Mộc Tiên Thiên (tài lộc)",
    "6-9": "Hỏa Thiêu Thiên Môn (huyết quang)",
    "2-5": "Nhị Ngũ Hoàng (hung bệnh)",
}

# Thế Quái replacement stars for seam-line (kiêm) readings.
# Mountains absent here keep their own star ("thế mà không thế").
SUBSTITUTE_STAR: dict[str, int] = {
    "giap": 1,
    "than": 1,
    "nham": 2,
    "mao": 2,
    "at": 2,
    "ton": 6,
    "ti": 6,
    "suu": 7,
    "can": 7,
    "binh": 7,
    "dinh": 9,
    "canh": 9,
}

# River Diagram (Hà Đồ) pairs of earth numbers
RIVER_DIAGRAM_PAIRS: frozenset[str] = frozenset({"1-6", "2-7", "3-8", "4-9"})

STAR_NAMES: dict[int, str] = {
    1: "Nhất Bạch",
    2: "Nhị Hắc",
    3: "Tam Bích",
    4: "Tứ Lục",
    5: "Ngũ Hoàng",
    6: "Lục Bạch",
    7: "Thất Xích",
    8: "Bát Bạch",
    9: "Cửu Tử",
}

PHASE_LABELS: dict[Phase, str] = {
    Phase.PROSPEROUS: "Vượng",
    Phase.GENERATING: "Sinh",
    Phase.ADVANCING: "Tiến",
    Phase.DECLINING: "Thoái",
    Phase.DEAD: "Tử",
}

ELEMENT_LABELS: dict[Element, str] = {
    Element.METAL: "Kim",
    Element.WOOD: "Mộc",
    Element.WATER: "Thủy",
    Element.FIRE: "Hỏa",
    Element.EARTH: "Thổ",
}

DIRECTION_KIND_LABELS: dict[DirectionKind, str] = {
    DirectionKind.ORTHODOX: "Chính hướng",
    DirectionKind.SEAM: "Kiêm hướng",
    DirectionKind.SMALL_VOID: "Tiểu Không Vong",
    DirectionKind.LARGE_VOID: "Đại Không Vong",
}

VOID_WARNING = "Hướng phạm Không Vong (≥7°), nên lập 2 tinh bàn và kiểm tra DKV/TKV."


def pair_key(a: int, b: int) -> str:
    """Unordered key for two star numbers."""
    return f"{min(a, b)}-{max(a, b)}"


assert len(SUBSTITUTE_STAR) == 12, "Thế Quái covers exactly 12 mountains"
assert len(PAIR_LABELS) == 9
assert set(ELEMENT_BY_STAR) == set(range(1, 10))
