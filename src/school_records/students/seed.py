"""Demo students written on first run (stored row shape)."""

DEMO_STUDENTS = [
    {
        "id": "1",
        "firstName": "Ana",
        "lastName": "García",
        "studentCode": "B33001",
        "level": "primary",
        "section": "3",
        "grade": "3° Grado",
        "parentId": "101",
        "photoUrl": None,
    },
    {
        "id": "2",
        "firstName": "Carlos",
        "lastName": "López",
        "studentCode": "B33002",
        "level": "primary",
        "section": "3",
        "grade": "3° Grado",
        "parentId": "102",
        "photoUrl": None,
    },
    {
        "id": "3",
        "firstName": "María",
        "lastName": "Rodríguez",
        "studentCode": "AII001",
        "level": "initial",
        "section": "II",
        "grade": "Sección II",
        "parentId": "103",
        "photoUrl": None,
    },
    {
        "id": "4",
        "firstName": "Juan",
        "lastName": "Pérez",
        "studentCode": "B11001",
        "level": "primary",
        "section": "1",
        "grade": "1° Grado",
        "parentId": "104",
        "photoUrl": None,
    },
    {
        "id": "5",
        "firstName": "Laura",
        "lastName": "Martínez",
        "studentCode": "AI001",
        "level": "initial",
        "section": "I",
        "grade": "Sección I",
        "parentId": "105",
        "photoUrl": None,
    },
]
