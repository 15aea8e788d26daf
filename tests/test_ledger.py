#!/usr/bin/env python3
"""Tests for FuelLedger."""

import logging
import threading
from datetime import date, datetime

import pytest

from carlog import Garage, NotFoundError, ValidationError


@pytest.fixture
def car(garage):
    return garage.create_car("Toyota", "Corolla", 2018)


@pytest.fixture
def ledger(garage):
    return garage.ledger


class TestAddEntry:
    """Tests for FuelLedger.add_entry."""

    def test_returns_stored_entry(self, ledger, car):
        entry = ledger.add_entry(car.id, 40.0, 62.5, 10000)
        assert entry.id == 1
        assert entry.car_id == car.id
        assert entry.liters == 40.0
        assert entry.price == 62.5
        assert entry.odometer == 10000
        assert entry.timestamp == datetime(2025, 3, 1, 8, 0)

    def test_integer_amounts_stored_as_float(self, ledger, car):
        entry = ledger.add_entry(car.id, 40, 60, 10000)
        assert isinstance(entry.liters, float)
        assert isinstance(entry.price, float)

    def test_attaches_entry_to_car(self, garage, ledger, car):
        first = ledger.add_entry(car.id, 40.0, 60.0, 10000)
        second = ledger.add_entry(car.id, 38.0, 57.0, 10500)
        assert garage.get_car(car.id).fuel_entry_ids == [first.id, second.id]

    def test_unknown_car(self, ledger):
        with pytest.raises(NotFoundError):
            ledger.add_entry(99, 40.0, 60.0, 10000)
        assert ledger.count() == 0

    @pytest.mark.parametrize("odometer", [10500, 10499, 1])
    def test_odometer_must_increase(self, ledger, car, odometer):
        ledger.add_entry(car.id, 40.0, 60.0, 10000)
        ledger.add_entry(car.id, 38.0, 57.0, 10500)
        with pytest.raises(ValidationError, match="Invalid odometer reading") as exc:
            ledger.add_entry(car.id, 45.0, 66.0, odometer)
        assert exc.value.field == "odometer"
        assert ledger.count() == 2

    def test_rejected_odometer_is_logged(self, ledger, car, caplog):
        ledger.add_entry(car.id, 40.0, 60.0, 10000)
        with caplog.at_level(logging.WARNING, logger="carlog.ledger"):
            with pytest.raises(ValidationError) as exc:
                ledger.add_entry(car.id, 45.0, 66.0, 9000)
        assert str(exc.value) == (
            "Invalid odometer reading: 9000. Must be greater than the last reading: 10000"
        )
        record = caplog.records[-1]
        assert record.levelno == logging.WARNING
        assert record.args == (car.id, 9000, 10000)

    def test_odometer_is_per_car(self, garage, ledger, car):
        other = garage.create_car("Honda", "Civic", 2020)
        ledger.add_entry(car.id, 40.0, 60.0, 50000)
        entry = ledger.add_entry(other.id, 40.0, 60.0, 100)
        assert entry.odometer == 100

    @pytest.mark.parametrize("liters,price,odometer,field", [
        (0, 60.0, 10000, "liters"),
        (-1.5, 60.0, 10000, "liters"),
        (40.0, 0, 10000, "price"),
        (40.0, -60.0, 10000, "price"),
        (40.0, 60.0, 0, "odometer"),
        (40.0, 60.0, -10, "odometer"),
        (float("nan"), 60.0, 10000, "liters"),
        (40.0, float("inf"), 10000, "price"),
        ("40", 60.0, 10000, "liters"),
        (40.0, None, 10000, "price"),
        (40.0, 60.0, 10000.5, "odometer"),
        (True, 60.0, 10000, "liters"),
    ])
    def test_invalid_values(self, ledger, car, liters, price, odometer, field):
        with pytest.raises(ValidationError) as exc:
            ledger.add_entry(car.id, liters, price, odometer)
        assert exc.value.field == field
        assert ledger.count() == 0

    def test_rejected_entry_leaves_car_unchanged(self, garage, ledger, car):
        ledger.add_entry(car.id, 40.0, 60.0, 10000)
        with pytest.raises(ValidationError):
            ledger.add_entry(car.id, 40.0, 60.0, 9000)
        assert len(garage.get_car(car.id).fuel_entry_ids) == 1

    def test_concurrent_adds_keep_odometer_strictly_increasing(self, ledger, car):
        """All threads race with the same reading; exactly one may win."""
        n = 16
        barrier = threading.Barrier(n)
        failures = []

        def worker():
            barrier.wait()
            try:
                ledger.add_entry(car.id, 40.0, 60.0, 10000)
            except ValidationError:
                failures.append(1)

        threads = [threading.Thread(target=worker) for _ in range(n)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert ledger.count() == 1
        assert len(failures) == n - 1


class TestRetrieval:
    """Tests for entries_for_car and all_entries."""

    def test_entries_for_car_sorted_by_odometer(self, garage, ledger, car):
        other = garage.create_car("Honda", "Civic", 2020)
        ledger.add_entry(car.id, 40.0, 60.0, 10000)
        ledger.add_entry(other.id, 30.0, 45.0, 500)
        ledger.add_entry(car.id, 38.0, 57.0, 10500)

        entries = ledger.entries_for_car(car.id)
        assert [e.odometer for e in entries] == [10000, 10500]
        assert all(e.car_id == car.id for e in entries)

    def test_entries_for_unknown_car_is_empty(self, ledger):
        assert ledger.entries_for_car(99) == []

    def test_all_entries_sorted_by_timestamp(self, garage, ledger, car):
        other = garage.create_car("Honda", "Civic", 2020)
        ledger.add_entry(car.id, 40.0, 60.0, 10000)
        ledger.add_entry(other.id, 30.0, 45.0, 500)
        ledger.add_entry(car.id, 38.0, 57.0, 10500)

        entries = ledger.all_entries()
        assert [e.id for e in entries] == [1, 2, 3]
        assert entries == sorted(entries, key=lambda e: e.timestamp)

    def test_timestamp_ties_keep_insertion_order(self):
        same_time = datetime(2025, 3, 1, 8, 0)
        garage = Garage(today=lambda: date(2025, 6, 1), clock=lambda: same_time)
        a = garage.create_car("Toyota", "Corolla", 2018)
        b = garage.create_car("Honda", "Civic", 2020)
        garage.add_fuel_entry(b.id, 30.0, 45.0, 500)
        garage.add_fuel_entry(a.id, 40.0, 60.0, 10000)
        garage.add_fuel_entry(b.id, 31.0, 46.0, 900)

        assert [e.id for e in garage.all_fuel_entries()] == [1, 2, 3]
