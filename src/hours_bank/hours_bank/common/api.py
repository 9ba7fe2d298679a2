from __future__ import annotations

import logging
from functools import wraps

from flask import jsonify, request

from ..core.exceptions import DomainError, NotFoundError, ValidationError

logger = logging.getLogger(__name__)


def json_error(message: str, status: int):
    return jsonify({"success": False, "message": message}), status


def json_body() -> dict:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError("Corpo JSON inválido")
    return data


def api_errors(view):
    """Map domain errors raised by a JSON view to error responses."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        try:
            return view(*args, **kwargs)
        except NotFoundError as e:
            return json_error(str(e), 404)
        except DomainError as e:
            return json_error(str(e), 400)
        except Exception:
            logger.exception("Unhandled error in %s", view.__name__)
            return json_error("Erro interno do sistema", 500)

    return wrapper
