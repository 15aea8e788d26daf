"""HTTP client for the carlog JSON API."""

import logging
from typing import Any, Dict, List, Optional

import requests

from .car import Car
from .errors import ApiError
from .fuel_entry import FuelEntry
from .fuel_stats import FuelStats

_logger = logging.getLogger(__name__)


class ApiClient:
    """
    Thin wrapper over the carlog HTTP API.

    Unwraps the response envelope and returns model objects. Any failure
    envelope, non-JSON body or connection problem raises ApiError.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def create_car(self, brand: str, model: str, year: int) -> Car:
        data = self._request(
            "POST", "/api/cars", json={"brand": brand, "model": model, "year": year}
        )
        return Car.from_dict(data)

    def list_cars(self) -> List[Car]:
        return [Car.from_dict(d) for d in self._request("GET", "/api/cars") or []]

    def get_car(self, car_id: int) -> Car:
        return Car.from_dict(self._request("GET", f"/api/cars/{car_id}"))

    def add_fuel_entry(
        self, car_id: int, liters: float, price: float, odometer: int
    ) -> FuelEntry:
        data = self._request(
            "POST",
            f"/api/cars/{car_id}/fuel",
            json={"liters": liters, "price": price, "odometer": odometer},
        )
        return FuelEntry.from_dict(data)

    def get_fuel_entries(self, car_id: int) -> List[FuelEntry]:
        data = self._request("GET", f"/api/cars/{car_id}/fuel") or []
        return [FuelEntry.from_dict(d) for d in data]

    def get_fuel_stats(self, car_id: int) -> FuelStats:
        return FuelStats.from_dict(self._request("GET", f"/api/cars/{car_id}/fuel/stats"))

    def _request(self, method: str, path: str, json: Optional[Dict] = None) -> Any:
        url = f"{self.base_url}{path}"
        _logger.debug("%s %s", method, url)
        try:
            response = self.session.request(method, url, json=json, timeout=self.timeout)
        except requests.RequestException as e:
            raise ApiError(f"Cannot reach {self.base_url}: {e}") from e

        try:
            body = response.json()
        except ValueError:
            raise ApiError(
                f"Invalid response from server (HTTP {response.status_code})",
                status_code=response.status_code,
            ) from None

        if not isinstance(body, dict):
            raise ApiError(
                f"Invalid response from server (HTTP {response.status_code})",
                status_code=response.status_code,
            )
        if not body.get("success") or response.status_code >= 400:
            raise ApiError(
                body.get("resp_msg") or "Something went wrong",
                status_code=response.status_code,
                errors=body.get("errors"),
            )
        return body.get("data")
