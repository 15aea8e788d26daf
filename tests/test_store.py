#!/usr/bin/env python3
"""Tests for EntityStore."""

import threading
from datetime import datetime

from carlog import Car, EntityStore, FuelEntry


class TestEntityStorePut:
    """Tests for EntityStore.put."""

    def test_assigns_ids_from_one(self):
        store = EntityStore("car")
        first = store.put(Car("Toyota", "Corolla", 2018))
        second = store.put(Car("Honda", "Civic", 2020))
        assert first.id == 1
        assert second.id == 2

    def test_keeps_existing_id(self):
        """An entity that already has an ID is stored under it."""
        store = EntityStore("car")
        car = store.put(Car("Toyota", "Corolla", 2018, id=42))
        assert car.id == 42
        assert store.get(42) is car

    def test_assigned_ids_skip_past_explicit_ids(self):
        store = EntityStore("car")
        first = store.put(Car("Toyota", "Corolla", 2018, id=1))
        assigned = store.put(Car("Honda", "Civic", 2020))
        later = store.put(Car("Mazda", "3", 2021, id=42))
        after = store.put(Car("Kia", "Rio", 2019))
        assert assigned.id == 2
        assert after.id == 43
        assert store.get(1) is first
        assert store.get(42) is later
        assert store.count() == 4

    def test_explicit_id_below_counter_does_not_rewind_it(self):
        store = EntityStore("car")
        store.put(Car("Toyota", "Corolla", 2018))
        store.put(Car("Honda", "Civic", 2020))
        store.put(Car("Mazda", "3", 2021, id=1))
        assert store.put(Car("Kia", "Rio", 2019)).id == 3

    def test_separate_stores_have_separate_counters(self):
        cars = EntityStore("car")
        entries = EntityStore("fuel entry")
        cars.put(Car("Toyota", "Corolla", 2018))
        cars.put(Car("Honda", "Civic", 2020))
        entry = entries.put(FuelEntry(1, 40.0, 60.0, 1000, datetime(2025, 1, 1)))
        assert entry.id == 1

    def test_input_entity_is_not_modified(self):
        store = EntityStore("car")
        car = Car("Toyota", "Corolla", 2018)
        stored = store.put(car)
        assert car.id is None
        assert stored.id == 1


class TestEntityStoreLookup:
    """Tests for get, list and count."""

    def test_get_unknown_returns_none(self):
        store = EntityStore("car")
        assert store.get(99) is None

    def test_list_is_snapshot_in_insertion_order(self):
        store = EntityStore("car")
        store.put(Car("Toyota", "Corolla", 2018))
        store.put(Car("Honda", "Civic", 2020))
        snapshot = store.list()
        store.put(Car("Mazda", "3", 2021))
        assert [c.id for c in snapshot] == [1, 2]
        assert [c.id for c in store.list()] == [1, 2, 3]

    def test_count(self):
        store = EntityStore("car")
        assert store.count() == 0
        store.put(Car("Toyota", "Corolla", 2018))
        assert store.count() == 1
        assert len(store) == 1


class TestEntityStoreConcurrency:
    """Concurrent puts never share an ID or lose an insert."""

    def test_concurrent_puts(self):
        store = EntityStore("car")
        barrier = threading.Barrier(8)

        def worker(n):
            barrier.wait()
            for i in range(50):
                store.put(Car(f"Brand{n}", f"Model{i}", 2020))

        threads = [threading.Thread(target=worker, args=(n,)) for n in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        ids = sorted(c.id for c in store.list())
        assert ids == list(range(1, 401))
        assert store.count() == 400
