from __future__ import annotations

import dataclasses
from enum import Enum
from functools import wraps
from typing import Any, Callable

from flask import jsonify, request

from ..app_logger import get_logger
from ..core.exceptions import PersistenceError, ValidationError

logger = get_logger(__name__)


def to_json(value: Any) -> Any:
    """Dataclasses/enums to plain JSON-ready structures."""
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {f.name: to_json(getattr(value, f.name)) for f in dataclasses.fields(value)}
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, dict):
        return {k: to_json(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_json(v) for v in value]
    return value


def json_body() -> dict:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError("Se esperaba un cuerpo JSON")
    return data


def error_response(message: str, status: int):
    return jsonify({"success": False, "message": message}), status


def recover_with(default: Callable[[], Any]):
    """Answer ``default()`` instead of failing when storage is unreadable.

    Used on read-only screens that should render empty rather than error.
    """

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            try:
                return view(*args, **kwargs)
            except PersistenceError:
                logger.exception("Storage fault in %s; answering default", view.__name__)
                return jsonify(to_json(default()))

        return wrapper

    return decorator
