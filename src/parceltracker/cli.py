#!/usr/bin/env python3
"""Parceltracker CLI for registering and tracking parcels."""

import argparse
import logging
import sys

import questionary
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from parceltracker.config import config
from parceltracker.parcel import (
    Parcel,
    ParcelNotFoundError,
    ParcelService,
    ParcelStatusError,
)

console = Console()

STATUS_STYLES = {
    "registered": "cyan",
    "sent": "yellow",
    "delivered": "green",
}


def configure_logging() -> None:
    logging.basicConfig(
        level=config.log_level,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )


def print_parcels(client: int, parcels: list[Parcel]) -> None:
    """Render a client's parcels as a table."""
    if not parcels:
        console.print(f"[dim]No parcels for client {client}.[/]")
        return

    table = Table(title=f"Parcels for client {client}")
    table.add_column("Number", justify="right")
    table.add_column("Status")
    table.add_column("Address")
    table.add_column("Created")
    for p in parcels:
        style = STATUS_STYLES.get(p.status.value, "white")
        table.add_row(str(p.number), f"[{style}]{p.status.value}[/]", p.address, p.created_at)
    console.print(table)


def register(service: ParcelService, args) -> None:
    parcel = service.register(args.client, args.address)
    console.print(
        f"[green]Registered parcel {parcel.number}[/] for client {parcel.client} "
        f"to '{parcel.address}' at {parcel.created_at}"
    )


def list_parcels(service: ParcelService, args) -> None:
    print_parcels(args.client, service.client_parcels(args.client))


def advance(service: ParcelService, args) -> None:
    status = service.next_status(args.number)
    if status is None:
        console.print(f"[dim]Parcel {args.number} is already delivered.[/]")
        return
    console.print(f"[green]Parcel {args.number} is now {status.value}.[/]")


def set_address(service: ParcelService, args) -> None:
    service.change_address(args.number, args.address)
    console.print(f"[green]Parcel {args.number} will be delivered to '{args.address}'.[/]")


def delete(service: ParcelService, args) -> None:
    if not args.yes and not questionary.confirm(f"Delete parcel {args.number}?").ask():
        console.print("[dim]Cancelled.[/]")
        return
    service.delete(args.number)
    console.print(f"[green]Deleted parcel {args.number}.[/]")


def demo(service: ParcelService, args) -> None:
    """Walk a client's parcels through the whole lifecycle."""
    client = args.client

    parcel = service.register(client, "Pskov, Voennaya 15")
    console.print(f"Registered parcel {parcel.number} to '{parcel.address}'")

    service.change_address(parcel.number, "Saratov, Vesnaya 33")
    console.print(f"Parcel {parcel.number} readdressed to 'Saratov, Vesnaya 33'")

    status = service.next_status(parcel.number)
    console.print(f"Parcel {parcel.number} is now {status.value}")

    print_parcels(client, service.client_parcels(client))

    # A sent parcel can no longer be deleted.
    try:
        service.delete(parcel.number)
    except ParcelStatusError as e:
        console.print(f"[yellow]{e}[/]")

    print_parcels(client, service.client_parcels(client))

    parcel = service.register(client, "Saratov, Vesnaya 33")
    console.print(f"Registered parcel {parcel.number} to '{parcel.address}'")
    service.delete(parcel.number)
    console.print(f"Deleted parcel {parcel.number}")

    print_parcels(client, service.client_parcels(client))


COMMANDS = {
    "register": register,
    "list": list_parcels,
    "advance": advance,
    "set-address": set_address,
    "delete": delete,
    "demo": demo,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Parceltracker CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)

    p = subparsers.add_parser("register", help="Register a new parcel")
    p.add_argument("--client", type=int, required=True)
    p.add_argument("--address", required=True)

    p = subparsers.add_parser("list", help="List a client's parcels")
    p.add_argument("--client", type=int, required=True)

    p = subparsers.add_parser("advance", help="Move a parcel to its next status")
    p.add_argument("number", type=int)

    p = subparsers.add_parser("set-address", help="Change a registered parcel's address")
    p.add_argument("number", type=int)
    p.add_argument("address")

    p = subparsers.add_parser("delete", help="Delete a registered parcel")
    p.add_argument("number", type=int)
    p.add_argument("--yes", action="store_true", help="Skip the confirmation prompt")

    p = subparsers.add_parser("demo", help="Walk through the parcel lifecycle")
    p.add_argument("--client", type=int, default=1)

    return parser


def main(argv: list[str] = None, service: ParcelService = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging()
    service = service or ParcelService()

    try:
        COMMANDS[args.command](service, args)
    except (ParcelNotFoundError, ParcelStatusError) as e:
        console.print(f"[red]{e}[/]")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
