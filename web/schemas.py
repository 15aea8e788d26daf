"""JSON schemas for API request bodies and a field-error collector."""

from typing import Any, Dict

from jsonschema import Draft7Validator

CAR_REQUEST_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "required": ["brand", "model", "year"],
    "properties": {
        "brand": {"type": "string", "pattern": r"\S"},
        "model": {"type": "string", "pattern": r"\S"},
        "year": {"type": "integer", "minimum": 1900, "maximum": 2100},
    },
}

FUEL_ENTRY_REQUEST_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "required": ["liters", "price", "odometer"],
    "properties": {
        "liters": {"type": "number", "exclusiveMinimum": 0},
        "price": {"type": "number", "exclusiveMinimum": 0},
        "odometer": {"type": "integer", "exclusiveMinimum": 0},
    },
}

_LABELS = {
    "brand": "Brand",
    "model": "Model",
    "year": "Year",
    "liters": "Liters",
    "price": "Price",
    "odometer": "Odometer reading",
}

_MESSAGES = {
    ("brand", "pattern"): "Brand is required and cannot be blank",
    ("model", "pattern"): "Model is required and cannot be blank",
    ("year", "minimum"): "Year must be at least 1900",
    ("year", "maximum"): "Year cannot exceed 2100",
    ("liters", "exclusiveMinimum"): "Liters must be a positive value",
    ("price", "exclusiveMinimum"): "Price must be a positive value",
    ("odometer", "exclusiveMinimum"): "Odometer reading must be a positive value",
}


def field_errors(instance: Any, schema: Dict[str, Any]) -> Dict[str, str]:
    """
    Validate a request body and return {field: message} for each problem.

    An empty dict means the body is valid. Only the first problem per
    field is reported.
    """
    errors: Dict[str, str] = {}
    validator = Draft7Validator(schema)
    for error in sorted(validator.iter_errors(instance), key=lambda e: list(e.path)):
        if not error.path:
            if error.validator == "required":
                for name in error.validator_value:
                    if name not in instance:
                        errors.setdefault(name, f"{_LABELS.get(name, name)} is required")
            else:
                errors.setdefault("body", "Request body must be a JSON object")
            continue
        name = str(error.path[0])
        message = _MESSAGES.get((name, error.validator))
        if message is None and error.validator == "type":
            message = f"{_LABELS.get(name, name)} must be of type {error.validator_value}"
        errors.setdefault(name, message or error.message)
    return errors
