"""School records package.

Feature modules (students, attendance, grades, schedules, recognition) each
own one collection in a key-value backend, with a thin Flask controller
layer on top of the service/repository layers.
"""
