#!/usr/bin/env python3
"""
Command-line client for car and fuel tracking.

Commands:
  create-car  - Register a new car
  list-cars   - List all registered cars
  show-car    - Show one car
  add-fuel    - Record a refuel for a car
  fuel-log    - List a car's refuels
  fuel-stats  - Show fuel statistics for a car
"""

import argparse
import logging
import sys
from typing import List, Optional

from tabulate import tabulate

from carlog import (
    ApiError,
    Car,
    CarlogError,
    FuelEntry,
    FuelStats,
    load_config,
    setup_logging,
)
from carlog.client import ApiClient

# =============================================================================
# Formatting helpers
# =============================================================================


def format_liters(liters: Optional[float]) -> str:
    """Format a fuel quantity for display."""
    return f"{liters:,.2f} L" if liters is not None else "-"


def format_cost(cost: Optional[float]) -> str:
    """Format a price for display."""
    return f"{cost:,.2f}" if cost is not None else "-"


def format_odometer(odometer: Optional[int]) -> str:
    return f"{odometer:,} km" if odometer is not None else "-"


def format_consumption(consumption: Optional[float]) -> str:
    """Format average consumption, with a note when it can't be computed."""
    if consumption is None:
        return "N/A (insufficient data)"
    return f"{consumption:.2f} L/100km"


def make_cars_table(cars: List[Car]) -> List[List[str]]:
    """Convert cars to table rows."""
    return [
        [str(car.id), car.brand, car.model, str(car.year), str(len(car.fuel_entry_ids))]
        for car in cars
    ]


def make_fuel_table(entries: List[FuelEntry]) -> List[List[str]]:
    """Convert fuel entries to table rows."""
    rows = []
    for entry in entries:
        rows.append(
            [
                str(entry.id),
                entry.timestamp.strftime("%Y-%m-%d %H:%M"),
                format_odometer(entry.odometer),
                format_liters(entry.liters),
                format_cost(entry.price),
                format_cost(entry.price_per_liter),
            ]
        )
    return rows


def make_stats_table(stats: FuelStats) -> List[List[str]]:
    return [
        ["Total Fuel", format_liters(stats.total_fuel)],
        ["Total Cost", format_cost(stats.total_cost)],
        ["Average Consumption", format_consumption(stats.average_consumption)],
    ]


# =============================================================================
# Car commands
# =============================================================================


def cmd_create_car(client: ApiClient, args) -> int:
    """Register a new car."""
    print(f"Creating car: {args.brand} {args.model} ({args.year})...")
    car = client.create_car(args.brand, args.model, args.year)

    print()
    print("Car created successfully!")
    print(f"  Brand:  {car.brand}")
    print(f"  Model:  {car.model}")
    print(f"  Year:   {car.year}")
    print(f"  ID:     {car.id}")
    return 0


def cmd_list_cars(client: ApiClient, args) -> int:
    cars = client.list_cars()
    if not cars:
        print("No cars registered.")
        return 0

    headers = ["ID", "Brand", "Model", "Year", "Refuels"]
    print(tabulate(make_cars_table(cars), headers=headers, tablefmt="simple"))
    return 0


def cmd_show_car(client: ApiClient, args) -> int:
    car = client.get_car(args.car_id)
    print(f"Car {car.id}: {car.name}")
    print(f"Refuels: {len(car.fuel_entry_ids)}")
    return 0


# =============================================================================
# Fuel commands
# =============================================================================


def cmd_add_fuel(client: ApiClient, args) -> int:
    """Record a refuel for a car."""
    if args.liters <= 0 or args.price <= 0 or args.odometer <= 0:
        print("Error: All values (liters, price, odometer) must be positive.")
        return 1

    print(f"Adding fuel entry to car ID {args.car_id}...")
    entry = client.add_fuel_entry(args.car_id, args.liters, args.price, args.odometer)

    print()
    print("Fuel entry added successfully!")
    print(f"  Entry ID:  {entry.id}")
    print(f"  Liters:    {format_liters(entry.liters)}")
    print(f"  Price:     {format_cost(entry.price)}")
    print(f"  Odometer:  {format_odometer(entry.odometer)}")
    print(f"  Timestamp: {entry.timestamp.isoformat(sep=' ', timespec='seconds')}")
    return 0


def cmd_fuel_log(client: ApiClient, args) -> int:
    entries = client.get_fuel_entries(args.car_id)
    if not entries:
        print(f"No fuel entries for car ID {args.car_id}.")
        return 0

    headers = ["ID", "Date", "Odometer", "Liters", "Price", "Per Liter"]
    print(tabulate(make_fuel_table(entries), headers=headers, tablefmt="simple"))
    return 0


def cmd_fuel_stats(client: ApiClient, args) -> int:
    """Show fuel statistics for a car."""
    stats = client.get_fuel_stats(args.car_id)

    print(f"Fuel Statistics for Car ID {args.car_id}")
    print()
    print(tabulate(make_stats_table(stats), tablefmt="plain"))
    return 0


# =============================================================================
# Main
# =============================================================================


COMMANDS = {
    "create-car": cmd_create_car,
    "list-cars": cmd_list_cars,
    "show-car": cmd_show_car,
    "add-fuel": cmd_add_fuel,
    "fuel-log": cmd_fuel_log,
    "fuel-stats": cmd_fuel_stats,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Car fuel tracker",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s create-car --brand Toyota --model Corolla --year 2018
  %(prog)s list-cars
  %(prog)s add-fuel --car-id 1 --liters 45.5 --price 65.50 --odometer 10500
  %(prog)s fuel-log --car-id 1
  %(prog)s fuel-stats --car-id 1
""",
    )
    parser.add_argument(
        "--api-url",
        type=str,
        help="Base URL of the API (default: $CARLOG_API_URL or http://localhost:5001)",
    )
    parser.add_argument(
        "--config",
        type=str,
        help="Path to a YAML config file",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log HTTP requests",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    create_parser = subparsers.add_parser("create-car", help="Register a new car")
    create_parser.add_argument("--brand", type=str, required=True, help="Manufacturer")
    create_parser.add_argument("--model", type=str, required=True, help="Model name")
    create_parser.add_argument("--year", type=int, required=True, help="Manufacture year")

    subparsers.add_parser("list-cars", help="List all registered cars")

    show_parser = subparsers.add_parser("show-car", help="Show one car")
    show_parser.add_argument("car_id", type=int, help="Car ID")

    fuel_parser = subparsers.add_parser("add-fuel", help="Record a refuel for a car")
    fuel_parser.add_argument("--car-id", type=int, required=True, help="Car ID")
    fuel_parser.add_argument("--liters", type=float, required=True, help="Fuel added")
    fuel_parser.add_argument("--price", type=float, required=True, help="Total cost")
    fuel_parser.add_argument(
        "--odometer", type=int, required=True, help="Odometer reading"
    )

    log_parser = subparsers.add_parser("fuel-log", help="List a car's refuels")
    log_parser.add_argument("--car-id", type=int, required=True, help="Car ID")

    stats_parser = subparsers.add_parser(
        "fuel-stats", help="Show fuel statistics for a car"
    )
    stats_parser.add_argument("--car-id", type=int, required=True, help="Car ID")

    return parser


def main(argv: Optional[List[str]] = None, client: Optional[ApiClient] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = load_config(args.config)
    except CarlogError as e:
        print(f"Error: {e}")
        return 1

    setup_logging("DEBUG" if args.verbose else config.log_level)
    logging.getLogger(__name__).debug("Using API at %s", args.api_url or config.api_url)

    if client is None:
        client = ApiClient(args.api_url or config.api_url, timeout=config.timeout)

    try:
        return COMMANDS[args.command](client, args)
    except ApiError as e:
        print(f"Error: {e}")
        if isinstance(e.errors, dict):
            for field, message in e.errors.items():
                print(f"  {field}: {message}")
        return 1


if __name__ == "__main__":
    sys.exit(main() or 0)
