from __future__ import annotations

from functools import wraps
from typing import Any

from flask import current_app, jsonify, request

from ..core.exceptions import NotFoundError, ValidationError


def json_body() -> dict[str, Any]:
    """Request JSON object; anything else counts as an empty payload."""
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def json_errors(failure_message: str):
    """Map domain errors to 400/404 and everything else to a static 500."""

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            try:
                return view(*args, **kwargs)
            except ValidationError as e:
                return jsonify({"error": str(e)}), 400
            except NotFoundError as e:
                return jsonify({"error": str(e)}), 404
            except Exception:
                current_app.logger.exception(failure_message)
                return jsonify({"error": failure_message}), 500

        return wrapper

    return decorator
