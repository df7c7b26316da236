#!/usr/bin/env python3
"""
Core data types for the Flying Star chart pipeline
Immutable value objects shared by the engine, the facade and the API layer
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

# ============================================================================
# VOCABULARIES
# ============================================================================


class Octant(str, Enum):
    """The 8 big directions (Bát Quái palaces around the center)"""

    NORTH = "bac"
    NORTHEAST = "dong-bac"
    EAST = "dong"
    SOUTHEAST = "dong-nam"
    SOUTH = "nam"
    SOUTHWEST = "tay-nam"
    WEST = "tay"
    NORTHWEST = "tay-bac"


class YuanLong(str, Enum):
    """Trigram line of a mountain (Tam Nguyên Long)"""

    HEAVEN = "thien"
    EARTH = "dia"
    MAN = "nhan"


class YinYang(str, Enum):
    YIN = "am"
    YANG = "duong"


class DirectionKind(str, Enum):
    """Precision of a facing/sitting reading relative to its mountain center"""

    ORTHODOX = "chinh"
    SEAM = "kiem"
    SMALL_VOID = "tieu-khong-vong"
    LARGE_VOID = "dai-khong-vong"

    @property
    def is_void(self) -> bool:
        return self in (DirectionKind.SMALL_VOID, DirectionKind.LARGE_VOID)


class Spin(str, Enum):
    FORWARD = "thuan"
    REVERSE = "nghich"


class Phase(str, Enum):
    """Star phase relative to the current period"""

    PROSPEROUS = "vuong"
    GENERATING = "sinh"
    ADVANCING = "tien"
    DECLINING = "thoai"
    DEAD = "tu"


class Element(str, Enum):
    METAL = "kim"
    WOOD = "moc"
    WATER = "thuy"
    FIRE = "hoa"
    EARTH = "tho"


class ElementRelation(str, Enum):
    """Relation of the first element to the second"""

    GENERATES = "sinh"
    GENERATED_BY = "được sinh"
    CONTROLS = "khắc"
    CONTROLLED_BY = "bị khắc"
    NEUTRAL = "bình"


class GateKind(str, Enum):
    ORTHODOX = "chinh"  # River-Diagram pair with the facing palace
    AUXILIARY = "phu"


# ============================================================================
# VALUE OBJECTS
# ============================================================================

BoardGrid = tuple[tuple[int, int, int], tuple[int, int, int], tuple[int, int, int]]


@dataclass(frozen=True)
class Coord:
    row: int
    col: int

    def to_dict(self) -> dict[str, int]:
        return {"row": self.row, "col": self.col}


@dataclass(frozen=True)
class Mountain:
    """One of the 24 mountains (15° compass sectors)"""

    key: str
    label: str
    center: float  # 0, 15, ..., 345
    start: float  # center - 7.5, normalized
    end: float  # center + 7.5, normalized (start > end across north)
    octant: Octant
    yuan: YuanLong
    yin_yang: YinYang

    def to_dict(self) -> dict[str, Any]:
        return {
            "key": self.key,
            "label": self.label,
            "center": self.center,
            "start": self.start,
            "end": self.end,
            "octant": self.octant.value,
            "yuan": self.yuan.value,
            "yin_yang": self.yin_yang.value,
        }


@dataclass(frozen=True)
class PeriodInfo:
    period: int  # 1-9
    start_year: int
    end_year: int

    def to_dict(self) -> dict[str, int]:
        return {
            "period": self.period,
            "start_year": self.start_year,
            "end_year": self.end_year,
        }


@dataclass(frozen=True)
class DirectionInfo:
    """Classified compass reading"""

    mountain: Mountain
    kind: DirectionKind
    delta: float  # Absolute angular distance from the mountain center

    def to_dict(self) -> dict[str, Any]:
        return {
            "mountain": self.mountain.to_dict(),
            "kind": self.kind.value,
            "delta": round(self.delta, 4),
        }


@dataclass(frozen=True)
class BoardSet:
    van: BoardGrid  # Period grid
    huong: BoardGrid  # Facing grid
    son: BoardGrid  # Sitting grid

    def to_dict(self) -> dict[str, list[list[int]]]:
        return {
            "van": [list(row) for row in self.van],
            "huong": [list(row) for row in self.huong],
            "son": [list(row) for row in self.son],
        }


@dataclass(frozen=True)
class CellMeta:
    """Analysis of one outer palace"""

    key: str
    label: str
    coord: Coord
    son: int
    huong: int
    van: int
    earth: int
    son_phase: Phase
    huong_phase: Phase
    son_element: Element | None
    huong_element: Element | None
    van_element: Element | None
    earth_element: Element | None
    relation: ElementRelation | None
    pairs: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        def _v(e: Enum | None) -> str | None:
            return e.value if e is not None else None

        return {
            "key": self.key,
            "label": self.label,
            "coord": self.coord.to_dict(),
            "son": self.son,
            "huong": self.huong,
            "van": self.van,
            "earth": self.earth,
            "son_phase": self.son_phase.value,
            "huong_phase": self.huong_phase.value,
            "son_element": _v(self.son_element),
            "huong_element": _v(self.huong_element),
            "van_element": _v(self.van_element),
            "earth_element": _v(self.earth_element),
            "relation": _v(self.relation),
            "pairs": list(self.pairs),
        }


@dataclass(frozen=True)
class ComposedBoards:
    """BoardComposer output: the three grids plus per-palace analysis"""

    boards: BoardSet
    cell_meta: tuple[CellMeta, ...]


@dataclass(frozen=True)
class GateResult:
    """Detected Thành Môn (auspicious gate)"""

    position: Octant
    kind: GateKind
    palace: Octant
    note: str

    def to_dict(self) -> dict[str, str]:
        return {
            "position": self.position.value,
            "kind": self.kind.value,
            "palace": self.palace.value,
            "note": self.note,
        }


@dataclass(frozen=True)
class AlternateBoard:
    """Second reading computed when the facing falls on a void line"""

    facing: DirectionInfo
    sitting: DirectionInfo
    boards: BoardSet
    cell_meta: tuple[CellMeta, ...]

    def to_dict(self) -> dict[str, Any]:
        return {
            "facing": self.facing.to_dict(),
            "sitting": self.sitting.to_dict(),
            "boards": self.boards.to_dict(),
            "cell_meta": [c.to_dict() for c in self.cell_meta],
        }


@dataclass(frozen=True)
class BoardResult:
    """Complete Flying Star chart"""

    period_info: PeriodInfo
    facing_degrees: float  # Normalized to [0, 360)
    facing: DirectionInfo
    sitting: DirectionInfo
    non_void_type: DirectionKind
    warning: str | None
    boards: BoardSet
    earth_grid: BoardGrid
    cell_meta: tuple[CellMeta, ...]
    alt: AlternateBoard | None = None
    gate: GateResult | None = None

    @property
    def is_void(self) -> bool:
        return self.facing.kind.is_void

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for API response"""
        return {
            "period_info": self.period_info.to_dict(),
            "facing_degrees": self.facing_degrees,
            "facing": self.facing.to_dict(),
            "sitting": self.sitting.to_dict(),
            "non_void_type": self.non_void_type.value,
            "is_void": self.is_void,
            "warning": self.warning,
            "boards": self.boards.to_dict(),
            "earth_grid": [list(row) for row in self.earth_grid],
            "cell_meta": [c.to_dict() for c in self.cell_meta],
            "alt": self.alt.to_dict() if self.alt else None,
            "gate": self.gate.to_dict() if self.gate else None,
        }


@dataclass(frozen=True)
class FlyingStarResult:
    """Annual star lookup result"""

    period: int
    annual_star: int
    direction_advice: str
    star_meaning: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "period": self.period,
            "annual_star": self.annual_star,
            "direction_advice": self.direction_advice,
            "star_meaning": self.star_meaning,
        }
