"""
Main entry point for the address book.

Interactive console for creating, finding, updating and deleting contacts.

File: main.py
Author: Aidan Allchin
Created: 2026-10-13
Last Modified: 2026-10-14
"""

import asyncio
import logging
import sys
from typing import Dict, List

from rich.console import Console
from rich.panel import Panel
from rich.prompt import Prompt, Confirm
from rich.table import Table
from rich import box

from address_book.config import AddressBookConfig, configure_logging
from address_book.database import RecordStore
from address_book.errors import AddressBookError
from address_book.models import Record
from address_book.service import AddressBookService

console = Console()
log = logging.getLogger(__name__)

# Menu action definitions
ACTIONS = {
    "1": {
        "name": "Create",
        "description": "Add a new contact (name, last name, address, phone required)",
    },
    "2": {
        "name": "Find",
        "description": "Search by any combination of fields",
    },
    "3": {
        "name": "Update",
        "description": "Change fields of the contact with a given phone",
    },
    "4": {
        "name": "Delete",
        "description": "Remove the contact with a given phone",
    },
    "5": {
        "name": "List all",
        "description": "Show every stored contact",
    },
}

FIELD_PROMPTS = {
    "name": "Name",
    "last_name": "Last name",
    "middle_name": "Middle name",
    "address": "Address",
    "phone": "Phone",
}


def show_menu():
    """Display the main menu."""
    console.print()
    console.print(
        Panel.fit(
            "[bold cyan]Address Book[/]",
            border_style="cyan",
        )
    )
    console.print()

    table = Table(box=box.ROUNDED, show_header=True, header_style="bold")
    table.add_column("Key", style="cyan", width=4)
    table.add_column("Action", style="white")
    table.add_column("Description", style="dim")

    for key, action in ACTIONS.items():
        table.add_row(key, action["name"], action["description"])

    console.print(table)
    console.print("  [cyan]q[/]  Quit")
    console.print()


def show_records(records: List[Record]):
    """Render records as a table."""
    if not records:
        console.print("[dim]No contacts found.[/]")
        return

    table = Table(box=box.ROUNDED, show_header=True, header_style="bold")
    table.add_column("ID", style="dim", justify="right")
    for label in FIELD_PROMPTS.values():
        table.add_column(label)

    for record in records:
        table.add_row(
            str(record.id),
            record.name,
            record.last_name,
            record.middle_name,
            record.address,
            record.phone,
        )

    console.print(table)
    console.print(f"[dim]{len(records)} contact(s)[/]")


def ask_fields(fields: List[str], hint: str = "leave empty to skip") -> Dict[str, str]:
    """Prompt for each field; empty answers stay empty."""
    console.print(f"[dim]({hint})[/]")
    return {
        field: Prompt.ask(FIELD_PROMPTS[field], default="", show_default=False).strip()
        for field in fields
    }


async def _create(service: AddressBookService):
    data = ask_fields(list(FIELD_PROMPTS), hint="middle name is optional")
    record = await service.create_record(data)
    console.print(f"[green]Saved contact {record.id} with phone {record.phone}[/]")


async def _find(service: AddressBookService):
    data = ask_fields(list(FIELD_PROMPTS))
    show_records(await service.get_records(data))


async def _update(service: AddressBookService):
    data = ask_fields(["phone"], hint="phone of the contact to change")
    data.update(ask_fields(["name", "last_name", "middle_name", "address"]))
    record = await service.update_record(data)
    console.print(f"[green]Updated contact {record.phone}[/]")


async def _delete(service: AddressBookService):
    data = ask_fields(["phone"], hint="phone of the contact to delete")
    if not Confirm.ask(f"Delete contact {data['phone']}?", default=False):
        console.print("[dim]Skipped.[/]")
        return
    phone = await service.delete_record(data)
    console.print(f"[green]Deleted contact {phone}[/]")


async def _list_all(service: AddressBookService):
    show_records(await service.get_records(Record()))


HANDLERS = {
    "1": _create,
    "2": _find,
    "3": _update,
    "4": _delete,
    "5": _list_all,
}


async def run_action(service: AddressBookService, choice: str):
    """Run a single menu action, reporting address book errors instead of crashing."""
    console.rule(f"[bold]{ACTIONS[choice]['name']}")
    try:
        await HANDLERS[choice](service)
    except AddressBookError as e:
        log.debug(f"{ACTIONS[choice]['name']} failed: {e}")
        console.print(f"[red]{e.user_message}[/] [dim]({e})[/]")


async def main():
    """Main entry point with interactive menu."""
    config = AddressBookConfig.from_env()
    configure_logging(config)

    store = RecordStore(config.db_path)
    await store.init()
    service = AddressBookService(store)

    # Check for command-line argument for non-interactive use
    if len(sys.argv) > 1:
        command = sys.argv[1].lower()
        if command == "init":
            console.print(f"[green]Database ready at {config.db_path}[/]")
            return
        elif command == "list":
            await _list_all(service)
            return
        else:
            console.print(f"[red]Unknown command: {command}[/]")
            console.print("[dim]Valid commands: init, list[/]")
            return

    # Interactive mode
    while True:
        show_menu()

        choice = Prompt.ask(
            "Select action",
            choices=list(ACTIONS.keys()) + ["q"],
            default="q",
        )

        if choice == "q":
            console.print("[dim]Goodbye![/]")
            break

        await run_action(service, choice)

        console.print()
        if not Confirm.ask("Continue?", default=True):
            console.print("[dim]Goodbye![/]")
            break


if __name__ == "__main__":
    asyncio.run(main())
