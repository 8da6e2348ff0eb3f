"""Demo grade books (0-20 scale) for the demo students."""

PERIODS = ("Primer Trimestre", "Segundo Trimestre", "Tercer Trimestre")

DEMO_SCORES = {
    "1": {
        "Matemáticas": (16, 18, 17),
        "Comunicación": (15, 14, 16),
        "Ciencias": (18, 19, 20),
        "Historia": (14, 13, 15),
    },
    "2": {
        "Matemáticas": (19, 20, 18),
        "Comunicación": (17, 16, 18),
        "Ciencias": (16, 15, 17),
        "Historia": (18, 17, 19),
    },
    "3": {
        "Matemáticas": (10, 12, 14),
        "Comunicación": (13, 12, 11),
        "Ciencias": (9, 10, 12),
        "Historia": (11, 13, 12),
    },
    "4": {
        "Matemáticas": (14, 15, 16),
        "Comunicación": (18, 17, 19),
        "Ciencias": (16, 15, 17),
        "Historia": (15, 16, 14),
    },
    "5": {
        "Matemáticas": (8, 10, 12),
        "Comunicación": (11, 13, 12),
        "Ciencias": (9, 11, 10),
        "Historia": (12, 10, 11),
    },
}


def demo_rows(student_id: str) -> list[dict]:
    rows = []
    for subject, scores in DEMO_SCORES.get(student_id, {}).items():
        for period, score in zip(PERIODS, scores):
            rows.append({"subject": subject, "period": period, "score": score, "comment": None, "recordedAt": None})
    return rows
