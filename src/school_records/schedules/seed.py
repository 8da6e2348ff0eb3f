"""Default weekly timetable written on first run."""

from ..core.constants import TIME_SLOTS


def _day(*classes: tuple[str, str, str]) -> dict:
    return {slot: {"subject": s, "teacher": t, "room": r} for slot, (s, t, r) in zip(TIME_SLOTS, classes)}


_BREAK = ("Recreo", "", "Patio")
_MATH = ("Matemáticas", "Prof. García", "A101")
_SPANISH = ("Español", "Prof. Rodríguez", "A102")
_SCIENCE = ("Ciencias", "Prof. López", "B201")
_HISTORY = ("Historia", "Prof. Martínez", "A103")
_ENGLISH = ("Inglés", "Prof. Smith", "B202")
_PE = ("Educación Física", "Prof. Hernández", "Gimnasio")
_ART = ("Arte", "Prof. Gómez", "C301")
_TUTORING = ("Tutoría", "Prof. Martínez", "A103")
_TECH = ("Tecnología", "Prof. Ramírez", "Lab 1")
_MUSIC = ("Música", "Prof. Torres", "Auditorio")

DEFAULT_SCHEDULE = {
    "Lunes": _day(_MATH, _SPANISH, _SCIENCE, _BREAK, _HISTORY, _ENGLISH, _PE),
    "Martes": _day(_SCIENCE, _MATH, _ENGLISH, _BREAK, _SPANISH, _ART, _TUTORING),
    "Miércoles": _day(_HISTORY, _SCIENCE, _MATH, _BREAK, _PE, _SPANISH, _TECH),
    "Jueves": _day(_ENGLISH, _HISTORY, _SPANISH, _BREAK, _MATH, _SCIENCE, _MUSIC),
    "Viernes": _day(_PE, _TECH, _MATH, _BREAK, _SCIENCE, _SPANISH, _ART),
}
