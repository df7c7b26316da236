"""
Annual star advice text.
Static prose keyed by octant and by annual star number.
"""

DIRECTION_ADVICE: dict[str, str] = {
    "bac": "Hướng Bắc thiên về giao tế, thủy khí – hợp lưu thông, ngoại giao, giữ thông thoáng.",
    "dong-bac": "Hướng Đông Bắc (cấn) ổn định, dưỡng khí – hợp tích lũy, học tập, nuôi dưỡng.",
    "dong": "Hướng Đông sinh trưởng – chú trọng sức khỏe, ánh sáng, khởi động dự án mới.",
    "dong-nam": "Hướng Đông Nam mộc vượng – hợp thương mại, tăng trưởng, cần cân bằng ẩm.",
    "nam": "Hướng Nam hỏa vượng – hợp danh tiếng, công nghệ, tránh nóng nảy.",
    "tay-nam": "Hướng Tây Nam thổ dưỡng – hợp hậu cần, chăm sóc gia đình, tránh ẩm thấp.",
    "tay": "Hướng Tây kim – hợp sáng tạo, trẻ nhỏ, kiểm soát chi tiêu.",
    "tay-bac": "Hướng Tây Bắc quyền quý – hợp lãnh đạo, quý nhân, giữ môi trường thoáng sạch.",
}

STAR_MEANINGS: dict[int, str] = {
    1: "Nhất Bạch Tham Lang: thông minh, lưu thông, hợp học tập/ngoại giao.",
    2: "Nhị Hắc Cự Môn: chú ý sức khỏe, kiện tụng; nên an tĩnh, hóa giải.",
    3: "Tam Bích Lộc Tồn: dễ tranh chấp, nên kiềm lời, hợp kế hoạch dài hạn.",
    4: "Tứ Lục Văn Khúc: văn chương, thi cử, sáng tạo, hợp nghiên cứu.",
    5: "Ngũ Hoàng Liêm Trinh: đại sát; tránh động thổ, cần hóa giải.",
    6: "Lục Bạch Vũ Khúc: quyền uy, kỷ luật; hợp công vụ/quân sự, tránh cứng nhắc.",
    7: "Thất Xích Phá Quân: hao tán, tổn tài; nên tiết chế.",
    8: "Bát Bạch Tả Phù: tài lộc, ổn định; hợp tích lũy, xây dựng, BĐS.",
    9: "Cửu Tử Hữu Bật: hỷ khí, danh tiếng; hợp khai trương, công nghệ/sáng tạo.",
}

assert len(DIRECTION_ADVICE) == 8
assert set(STAR_MEANINGS) == set(range(1, 10))
