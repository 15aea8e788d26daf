"""Standard JSON response envelope."""

from typing import Any, Optional

from flask import jsonify

SUCCESS_CODE = 100
ERROR_CODE = 101


def envelope(
    success: bool,
    message: str,
    resp_code: int,
    data: Any = None,
    pagination: Any = None,
    errors: Any = None,
) -> dict:
    """Build the envelope dict, leaving out members that are None."""
    body = {
        "success": success,
        "resp_msg": message,
        "resp_code": resp_code,
        "data": data,
        "pagination": pagination,
        "errors": errors,
    }
    return {key: value for key, value in body.items() if value is not None}


def success(data: Any, message: str = "Success", status: int = 200):
    """Success response; a dict with a 'pagination' key is unwrapped."""
    pagination = None
    if isinstance(data, dict) and "pagination" in data:
        pagination = data.get("pagination")
        data = data.get("data")
    body = envelope(True, message, SUCCESS_CODE, data=data, pagination=pagination)
    return jsonify(body), status


def error(message: Optional[str], status: int, errors: Any = None):
    body = envelope(
        False, message or "Something went wrong", ERROR_CODE, errors=errors
    )
    return jsonify(body), status
