from __future__ import annotations

import importlib
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .app_logger import setup_logging
from .attendance.controller import register as register_attendance
from .common.http import error_response
from .container import Container, build_backend, build_container
from .core.exceptions import NotFoundError, PersistenceError, ValidationError
from .grades.controller import register as register_grades
from .recognition.controller import register as register_recognition
from .schedules.controller import register as register_schedules
from .students.controller import register as register_students


def _register_error_handlers(app: Flask) -> None:
    @app.errorhandler(ValidationError)
    def _validation(e: ValidationError):
        return error_response(str(e), 400)

    @app.errorhandler(NotFoundError)
    def _not_found(e: NotFoundError):
        return error_response(str(e), 404)

    @app.errorhandler(PersistenceError)
    def _persistence(e: PersistenceError):
        app.logger.error("Storage fault: %s", e)
        return error_response("Error de almacenamiento, intente nuevamente", 503)


def create_app(*, container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.json.ensure_ascii = False

    logger = setup_logging(getattr(settings, "LOG_LEVEL", None))

    if container is None:
        storage = getattr(settings, "STORAGE_BACKEND", "memory")
        backend = build_backend(
            storage=storage,
            db_config=getattr(settings, "DB_CONFIG", None),
            init_schema=bool(getattr(settings, "AUTO_INIT_DB", False)),
        )
        container = build_container(backend=backend)
        logger.info("settings=%s storage=%s", settings_module, storage)

    if bool(getattr(settings, "AUTO_SEED_DB", False)):
        container.ensure_seeded()

    _register_error_handlers(app)
    register_students(app, container)
    register_attendance(app, container)
    register_grades(app, container)
    register_schedules(app, container)
    register_recognition(app, container)

    return app
