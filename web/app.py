"""Flask JSON API for car and fuel tracking."""

import logging
import os
from typing import Optional

from flask import Blueprint, Flask, current_app, request
from werkzeug.exceptions import HTTPException

from carlog import (
    Garage,
    NotFoundError,
    ValidationError,
    load_config,
    setup_logging,
)

from . import responses
from .schemas import CAR_REQUEST_SCHEMA, FUEL_ENTRY_REQUEST_SCHEMA, field_errors

_logger = logging.getLogger(__name__)

api = Blueprint("api", __name__)


def get_garage() -> Garage:
    """The Garage bound to the running app."""
    return current_app.extensions["garage"]


def create_app(garage: Optional[Garage] = None) -> Flask:
    """Build the app around one Garage. A fresh Garage is made if none is given."""
    app = Flask(__name__)
    app.extensions["garage"] = garage or Garage()
    app.register_blueprint(api)
    register_error_handlers(app)
    return app


# =============================================================================
# Error handlers
# =============================================================================


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(NotFoundError)
    def handle_not_found(e: NotFoundError):
        _logger.error("Not found: %s", e)
        return responses.error(str(e), 404)

    @app.errorhandler(ValidationError)
    def handle_validation(e: ValidationError):
        _logger.error("Invalid input: %s", e)
        errors = {e.field: str(e)} if e.field else None
        return responses.error(str(e), 400, errors)

    @app.errorhandler(HTTPException)
    def handle_http(e: HTTPException):
        return responses.error(e.description, e.code)

    @app.errorhandler(Exception)
    def handle_unexpected(e: Exception):
        _logger.exception("Unexpected error occurred")
        return responses.error(
            "An unexpected error occurred. Please try again later.", 500
        )


def _invalid_body(errors):
    _logger.error("Validation error occurred: %s", errors)
    return responses.error("Input validation error", 400, errors)


# =============================================================================
# Cars
# =============================================================================


@api.route("/api/cars", methods=["POST"])
def create_car():
    """Register a new car."""
    body = request.get_json(silent=True)
    errors = field_errors(body, CAR_REQUEST_SCHEMA)
    if errors:
        return _invalid_body(errors)

    _logger.info(
        "POST /api/cars - Creating car: %s %s (%s)",
        body["brand"],
        body["model"],
        body["year"],
    )
    car = get_garage().create_car(body["brand"], body["model"], body["year"])
    return responses.success(car.to_dict(), "Car created successfully", 201)


@api.route("/api/cars", methods=["GET"])
def list_cars():
    cars = get_garage().list_cars()
    return responses.success([car.to_dict() for car in cars])


@api.route("/api/cars/<int:car_id>", methods=["GET"])
def get_car(car_id: int):
    return responses.success(get_garage().get_car(car_id).to_dict())


# =============================================================================
# Fuel entries
# =============================================================================


@api.route("/api/cars/<int:car_id>/fuel", methods=["POST"])
def add_fuel_entry(car_id: int):
    """Record a refuel for a car."""
    body = request.get_json(silent=True)
    errors = field_errors(body, FUEL_ENTRY_REQUEST_SCHEMA)
    if errors:
        return _invalid_body(errors)

    _logger.info(
        "POST /api/cars/%s/fuel - Adding fuel entry: %sL at %s (odometer: %s)",
        car_id,
        body["liters"],
        body["price"],
        body["odometer"],
    )
    entry = get_garage().add_fuel_entry(
        car_id, body["liters"], body["price"], body["odometer"]
    )
    return responses.success(entry.to_dict(), "Fuel entry added successfully", 201)


@api.route("/api/cars/<int:car_id>/fuel", methods=["GET"])
def list_fuel_entries(car_id: int):
    entries = get_garage().fuel_entries(car_id)
    return responses.success([e.to_dict() for e in entries])


@api.route("/api/fuel", methods=["GET"])
def list_all_fuel_entries():
    entries = get_garage().all_fuel_entries()
    return responses.success([e.to_dict() for e in entries])


@api.route("/api/cars/<int:car_id>/fuel/stats", methods=["GET"])
def fuel_stats(car_id: int):
    return responses.success(get_garage().fuel_stats(car_id).to_dict())


@api.route("/servlet/fuel-stats", methods=["GET"])
def fuel_stats_by_query():
    """Fuel statistics with the car ID passed as ?carId=<id>."""
    raw = request.args.get("carId", "").strip()
    if not raw:
        return responses.error(
            "Missing required parameter: carId", 400, "MISSING_PARAMETER"
        )
    try:
        car_id = int(raw)
    except ValueError:
        _logger.error("Invalid carId format: %s", raw)
        return responses.error(
            "Invalid carId format. Must be a valid number.", 400, "INVALID_FORMAT"
        )

    try:
        stats = get_garage().fuel_stats(car_id)
    except NotFoundError as e:
        _logger.error("Car not found: %s", e)
        return responses.error(str(e), 404, "CAR_NOT_FOUND")
    return responses.success(stats.to_dict())


def main(config_path: Optional[str] = None):
    """Run the development server."""
    config_path = config_path or os.environ.get("CARLOG_CONFIG")
    config = load_config(config_path)
    setup_logging(config.log_level)
    app = create_app()
    app.run(debug=config.debug, host=config.host, port=config.port)


if __name__ == "__main__":
    main()
