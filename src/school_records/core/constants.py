"""Storage keys and domain constants.

Note: Keep constants here to avoid magic strings spread across code.
"""

STUDENTS_KEY = "students_data"
ATTENDANCE_KEY = "attendance_records"
GRADES_KEY_PREFIX = "grades_"
SCHEDULE_KEY = "schedule_data"
FACE_PROFILES_KEY = "face_recognition_data"

AVERAGE_PERIOD = "Promedio"
MIN_SCORE = 0
MAX_SCORE = 20

CODE_SEQUENCE_DIGITS = 3

INITIAL_SECTIONS = ("I", "II", "III")
PRIMARY_SECTIONS = ("1", "2", "3", "4", "5", "6")

TIME_SLOTS = (
    "7:00 - 8:00",
    "8:00 - 9:00",
    "9:00 - 10:00",
    "10:00 - 11:00",
    "11:00 - 12:00",
    "12:00 - 13:00",
    "13:00 - 14:00",
)
