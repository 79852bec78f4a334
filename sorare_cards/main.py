#!/usr/bin/env python3
"""
Sorare User Card Report

Reads Sorare user slugs from a text file, fetches each user's cards from the
Sorare GraphQL API and writes every (user, card) pair to an Excel workbook.

Usage:
    python -m sorare_cards.main [--users users.txt] [--output UserCards.xlsx]

Example:
    SORARE_API_KEY=... python -m sorare_cards.main --variant basic
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from sorare_cards.api.models import ReportVariant
from sorare_cards.api.sorare_client import SorareClient
from sorare_cards.config import DEFAULT_CONFIG_PATH, resolve_config
from sorare_cards.exceptions import SorareCardsError
from sorare_cards.exporters.excel_exporter import DEFAULT_OUTPUT_PATH, ExcelExporter
from sorare_cards.interfaces.exporter import IExporter
from sorare_cards.logging_config import setup_logging
from sorare_cards.services.card_service import CardService, CollectionResult
from sorare_cards.services.user_loader import DEFAULT_USERS_PATH, load_user_slugs

logger = logging.getLogger(__name__)


class CardReportApp:
    """
    Main application orchestrator.

    Load users, collect their cards, save the workbook once at the end.
    Fatal errors propagate; per-user failures are absorbed by CardService.
    """

    def __init__(self, card_service: CardService, exporter: IExporter):
        self._card_service = card_service
        self._exporter = exporter

    def run(self, users_path: Path, output_path: Path) -> CollectionResult:
        print(f"\n{'='*60}")
        print("Sorare User Card Report")
        print(f"{'='*60}")
        print(f"Users:   {users_path}")
        print(f"Output:  {output_path}")
        print(f"Variant: {self._card_service.variant.value}")
        print(f"{'='*60}\n")

        print("[1/3] Loading user list...")
        user_slugs = load_user_slugs(users_path)
        print(f"      Found {len(user_slugs)} users.")

        print("[2/3] Fetching cards from Sorare API...")
        result = self._card_service.collect(user_slugs)

        print("[3/3] Writing spreadsheet...")
        self._exporter.export(result.rows, output_path)
        print(f"      Saved to: {output_path}")

        self._print_summary(result)
        return result

    def _print_summary(self, result: CollectionResult) -> None:
        print(f"\n{'='*60}")
        print("SUMMARY")
        print(f"{'='*60}")
        print(f"  Users processed:     {len(result.processed)}")
        print(f"  Users failed:        {result.failed_count}")
        print(f"  Card rows written:   {result.row_count}")
        for user_slug, error in result.failures:
            print(f"    - {user_slug}: {error}")
        print(f"{'='*60}\n")


def create_app(
    api_key: str,
    variant: ReportVariant = ReportVariant.EXTENDED,
    paginate: bool = True,
) -> CardReportApp:
    """Factory function to create CardReportApp with dependencies."""
    client = SorareClient(api_key, paginate=paginate)
    card_service = CardService(client, variant=variant)
    exporter = ExcelExporter(variant=variant)
    return CardReportApp(card_service=card_service, exporter=exporter)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Export the cards of a list of Sorare users to an Excel workbook",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m sorare_cards.main
  python -m sorare_cards.main --users my_users.txt -o ./out/cards.xlsx
  SORARE_API_KEY=... python -m sorare_cards.main --variant basic --first-page-only
        """,
    )
    parser.add_argument(
        "--users",
        type=Path,
        default=DEFAULT_USERS_PATH,
        help="File with one user slug per line (default: users.txt)",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=DEFAULT_CONFIG_PATH,
        help="JSON file holding {\"api_key\": ...}; ignored when SORARE_API_KEY is set (default: config.json)",
    )
    parser.add_argument(
        "--output",
        "-o",
        type=Path,
        default=DEFAULT_OUTPUT_PATH,
        help="Output workbook, overwritten if present (default: UserCards.xlsx)",
    )
    parser.add_argument(
        "--variant",
        choices=[v.value for v in ReportVariant],
        default=ReportVariant.EXTENDED.value,
        help="'basic' (slug + asset id) or 'extended' (adds name, position, price, sale status)",
    )
    parser.add_argument(
        "--first-page-only",
        action="store_true",
        help=f"Fetch only the first {SorareClient.PAGE_SIZE} cards per user instead of following pagination",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def main(argv: Optional[List[str]] = None):
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)

    try:
        config = resolve_config(args.config)
        app = create_app(
            config.api_key,
            variant=ReportVariant(args.variant),
            paginate=not args.first_page_only,
        )
        app.run(args.users, args.output)
    except SorareCardsError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        print(f"Unexpected error: {e}", file=sys.stderr)
        raise

    print("Report completed successfully!")
    sys.exit(0)


if __name__ == "__main__":
    main()
