#!/usr/bin/env python
"""CLI to browse and edit the quote collection.

Usage:
    python scripts/quotes_cli.py list
    python scripts/quotes_cli.py add --text "..." --creator "..." [--image photo.jpg]
    python scripts/quotes_cli.py edit 0 interpretation "..."
    python scripts/quotes_cli.py delete 0

Indexes refer to the list order (0 = newest).
"""
import argparse
import sys
from pathlib import Path

# Add parent directory to path so 'inspira' imports work
sys.path.insert(0, str(Path(__file__).parent.parent))

from inspira.config import get_settings
from inspira.database.engine import init_db
from inspira.database.repository import QuoteStore
from inspira.images import ImageCodec
from inspira.models.schemas import QuoteField
from inspira.sync.controller import QuoteSyncController
from inspira.sync.validation import missing_quote_message
from inspira.utils.logger import setup_logging


def _print_quotes(controller):
    quotes = controller.quotes
    if not quotes:
        print("No quotes yet.")
        return
    for i, quote in enumerate(quotes):
        text = quote.text or "(empty)"
        by = f" - {quote.creator}" if quote.creator else ""
        image = " [image]" if quote.image_data else ""
        print(f"{i:3d}  {quote.date_created:%Y-%m-%d %H:%M}  {text}{by}{image}")


def cmd_list(controller, args):
    _print_quotes(controller)


def cmd_add(controller, args):
    message = missing_quote_message({QuoteField.TEXT.value: args.text})
    if message:
        print(message)
        return 1

    image_data = None
    if args.image:
        codec = ImageCodec(max_size=controller.settings.image_max_size)
        image_data = codec.encode(Path(args.image).read_bytes())

    record = controller.start_new_entry()
    if record is None:
        return 1
    controller.on_field_changed(QuoteField.TEXT, args.text)
    if args.creator:
        controller.on_field_changed(QuoteField.CREATOR, args.creator)
    if args.found:
        controller.on_field_changed(QuoteField.DESCRIPTION_OF_HOW_FOUND, args.found)
    if args.interpretation:
        controller.on_field_changed(QuoteField.INTERPRETATION, args.interpretation)
    if image_data is not None:
        controller.attach_image(image_data)

    print(f"Added quote {record.id}")
    return 0


def cmd_edit(controller, args):
    controller.select_existing(args.index)
    controller.on_field_changed(args.field, args.value)
    _print_quotes(controller)


def cmd_delete(controller, args):
    controller.select_existing(args.index)
    controller.delete_current()
    _print_quotes(controller)


def main():
    parser = argparse.ArgumentParser(description="Browse and edit saved quotes")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("list", help="List quotes, newest first")

    add = sub.add_parser("add", help="Add a quote")
    add.add_argument("--text", required=True, help="The quote itself")
    add.add_argument("--creator", help="Who said or wrote it")
    add.add_argument("--found", help="How you came across it")
    add.add_argument("--interpretation", help="What it means to you")
    add.add_argument("--image", help="Path to an image to attach")

    edit = sub.add_parser("edit", help="Change one field of a quote")
    edit.add_argument("index", type=int)
    edit.add_argument("field", choices=[f.value for f in QuoteField])
    edit.add_argument("value")

    delete = sub.add_parser("delete", help="Delete a quote")
    delete.add_argument("index", type=int)

    args = parser.parse_args()

    settings = get_settings()
    setup_logging(settings.log_level)
    init_db()
    controller = QuoteSyncController(QuoteStore(), settings=settings)
    controller.refresh()

    handlers = {
        "list": cmd_list,
        "add": cmd_add,
        "edit": cmd_edit,
        "delete": cmd_delete,
    }
    try:
        return handlers[args.command](controller, args) or 0
    except (IndexError, OSError, ValueError) as exc:
        print(exc)
        return 1


if __name__ == "__main__":
    sys.exit(main())
