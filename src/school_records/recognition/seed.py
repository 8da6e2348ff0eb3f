"""Demo face profiles enrolled for the demo students on first run (stored row shape)."""

DEMO_FACE_PROFILES = [
    {"studentId": student_id, "faceId": f"face_{student_id}", "registeredAt": ""}
    for student_id in ("1", "2", "3", "4", "5")
]
