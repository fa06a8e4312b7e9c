from __future__ import annotations

import logging
import re
from dataclasses import asdict, is_dataclass
from datetime import date, datetime
from enum import Enum
from functools import wraps
from typing import Any, Mapping, Type, TypeVar

from flask import g, jsonify, request, session
from mysql.connector import errors as mysql_errors
from pydantic import BaseModel
from pydantic import ValidationError as SchemaError

from ..core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    DomainError,
    NotFoundError,
    ValidationError,
)
from .principal import InchargeLookup, Principal, principal_from_session

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)

_STATUS_BY_ERROR = (
    (ValidationError, 400),
    (AuthenticationError, 401),
    (AuthorizationError, 403),
    (NotFoundError, 404),
    (ConflictError, 409),
)

_SNAKE_KEY = re.compile(r"^[a-z][a-z0-9]*(_[a-z0-9]+)+$")


def error_status(exc: DomainError) -> int:
    for cls, status in _STATUS_BY_ERROR:
        if isinstance(exc, cls):
            return status
    return 400


def _camel(key: str) -> str:
    if not _SNAKE_KEY.match(key):
        return key
    head, *rest = key.split("_")
    return head + "".join(part.capitalize() for part in rest)


def to_json(value: Any) -> Any:
    """Convert dataclasses/enums/dates into JSON-ready data with camelCase keys."""

    if is_dataclass(value) and not isinstance(value, type):
        value = asdict(value)
    if isinstance(value, Mapping):
        return {(_camel(k) if isinstance(k, str) else k): to_json(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_json(v) for v in value]
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    return value


def ok(payload: Any = None, *, status: int = 200):
    body: dict[str, Any] = {"success": True}
    if payload is not None:
        body.update(to_json(payload))
    return jsonify(body), status


def fail(message: str, status: int):
    return jsonify({"success": False, "message": message}), status


def json_endpoint(view):
    """Translate domain errors into JSON responses; never leak internals on 500."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        try:
            return view(*args, **kwargs)
        except DomainError as e:
            return fail(str(e), error_status(e))
        except mysql_errors.IntegrityError:
            # a unique key caught a write that raced past the service checks
            logger.warning("Integrity error in endpoint %s", request.endpoint, exc_info=True)
            return fail("This record was changed at the same time, please retry", 409)
        except Exception:
            logger.exception("Unhandled error in endpoint %s", request.endpoint)
            return fail("Server error. Try again later.", 500)

    return wrapper


def _describe(error: SchemaError) -> str:
    parts = []
    for err in error.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()))
        parts.append(f"{loc}: {err['msg']}" if loc else err["msg"])
    return "; ".join(parts)


def parse_body(schema: Type[M]) -> M:
    data = request.get_json(silent=True)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    try:
        return schema.model_validate(data)
    except SchemaError as e:
        raise ValidationError(_describe(e))


def parse_query(schema: Type[M]) -> M:
    data = {k: v for k, v in request.args.items() if v != ""}
    try:
        return schema.model_validate(data)
    except SchemaError as e:
        raise ValidationError(_describe(e))


def role_guard(incharges: InchargeLookup):
    """Build a ``role_required(*roles)`` decorator bound to the incharge store."""

    def role_required(*roles):
        def decorator(view):
            @wraps(view)
            def wrapper(*args, **kwargs):
                principal = principal_from_session(session, incharges)
                if principal.role not in roles:
                    raise AuthorizationError("You do not have permission for this action")
                g.principal = principal
                return view(*args, **kwargs)

            return wrapper

        return decorator

    return role_required


def current_principal() -> Principal:
    return g.principal
