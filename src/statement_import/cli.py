import argparse
import json
import logging
import sys
from pathlib import Path

from . import __version__
from .config import load_settings
from .logging_setup import setup_logging


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="statement-import")
    parser.add_argument("--version", action="store_true", help="Print version and exit")
    parser.add_argument(
        "command",
        nargs="?",
        default="health",
        choices=["health", "status-env", "parse", "review"],
        help="Command to run",
    )
    parser.add_argument("file", nargs="?", type=Path, default=None, help="OFX or CSV statement file")

    parser.add_argument(
        "--delimiter",
        type=str,
        default=None,
        help="CSV delimiter. If omitted, sniffed from the header line (.csv/.txt) "
        "or CSV_DEFAULT_DELIMITER.",
    )
    parser.add_argument("--json", action="store_true", help="Print the parse result as JSON (used with parse)")
    parser.add_argument("--ledger", type=Path, default=None, help="JSON list of existing transactions (used with review)")
    parser.add_argument("--categories", type=Path, default=None, help="JSON list of categories (used with review)")
    parser.add_argument(
        "--account",
        type=str,
        default=None,
        help="Destination account id; prints ledger drafts (used with review)",
    )

    args = parser.parse_args(argv)

    if args.version:
        print(__version__)
        return 0

    try:
        settings = load_settings()
    except ValueError as e:
        print(f"config error: {e}", file=sys.stderr)
        return 2

    setup_logging(settings.log_level)

    logger = logging.getLogger(__name__)

    if args.command == "health":
        logger.info("Application started successfully.")
        print("ok")
        return 0

    if args.command == "status-env":
        print("LOG_LEVEL =", settings.log_level)
        print("CSV_DEFAULT_DELIMITER =", repr(settings.csv_default_delimiter))
        return 0

    if args.file is None:
        print(f"{args.command}: a statement file is required", file=sys.stderr)
        return 2

    from .statement.detect import parse_statement_bytes
    from .templates import render_drafts, render_result, render_review

    try:
        data = args.file.read_bytes()
    except OSError as e:
        print(f"cannot read {args.file}: {e}", file=sys.stderr)
        return 2

    result = parse_statement_bytes(
        args.file.name,
        data,
        delimiter=args.delimiter,
        default_delimiter=settings.csv_default_delimiter,
    )

    if args.command == "parse":
        if args.json:
            print(json.dumps(result.model_dump(by_alias=True), ensure_ascii=False, indent=2))
        else:
            print(render_result(result))
        return 0 if result.success else 1

    # review
    from .pipeline import build_drafts, find_fallback_category, prepare_review
    from .storage import load_categories, load_existing_transactions

    try:
        existing = load_existing_transactions(args.ledger) if args.ledger else []
        categories = load_categories(args.categories) if args.categories else []
    except (OSError, ValueError) as e:
        print(f"invalid input: {e}", file=sys.stderr)
        return 2

    review = prepare_review(result, existing, categories)
    print(render_review(review))

    if not result.success:
        return 1

    if args.account:
        drafts = build_drafts(review, args.account, fallback=find_fallback_category(categories))
        print()
        print(render_drafts(drafts))

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
