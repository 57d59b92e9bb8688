"""
Command Line Entry Point

    awin-api transactions --start 2023-01-01 --end 2023-01-31T23:59:59 --output output/transactions.parquet
    awin-api commission-groups --advertiser-id 7

Credentials and client settings are read from AWIN_* environment variables.
"""

import argparse
import logging
import sys
from typing import List, Optional

from .coreutils.logging import setup_logging
from .coreutils.time import parse_cli_datetime
from .extract.awin_client import DEFAULT_TIMEZONE, AwinClient
from .load.local_storage import save_dataframe
from .transformation.transformers import (
    commission_groups_to_dataframe,
    transactions_to_dataframe,
)

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Awin publisher API client")
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable verbose logging"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    transactions = subparsers.add_parser(
        "transactions", help="Fetch transactions for a date range"
    )
    transactions.add_argument(
        "--start",
        required=True,
        type=parse_cli_datetime,
        help="Start date (YYYY-MM-DD or YYYY-MM-DDTHH:MM:SS)",
    )
    transactions.add_argument(
        "--end",
        required=True,
        type=parse_cli_datetime,
        help="End date (YYYY-MM-DD or YYYY-MM-DDTHH:MM:SS)",
    )
    transactions.add_argument(
        "--timezone", default=DEFAULT_TIMEZONE, help="Awin timezone name"
    )
    transactions.add_argument(
        "--verbose-commission-groups",
        action="store_true",
        help="Resolve the commission group of every transaction part",
    )
    transactions.add_argument(
        "--output", help="Output file (.parquet for Parquet, JSON otherwise)"
    )

    groups = subparsers.add_parser(
        "commission-groups", help="Fetch the commission groups of an advertiser"
    )
    groups.add_argument("--advertiser-id", required=True, type=int)
    groups.add_argument(
        "--output", help="Output file (.parquet for Parquet, JSON otherwise)"
    )

    return parser


def run(args: argparse.Namespace, client: AwinClient) -> int:
    if args.command == "transactions":
        if args.verbose_commission_groups:
            client.verbose_commission_groups = True
        transactions = client.get_transactions(args.start, args.end, args.timezone)
        df = transactions_to_dataframe(transactions)
        logger.info(f"📊 {len(transactions)} transactions, {df.height} transaction parts")
    else:
        groups = client.get_commission_groups(args.advertiser_id)
        df = commission_groups_to_dataframe(groups)
        logger.info(f"📊 {df.height} commission groups for advertiser {args.advertiser_id}")

    if args.output:
        save_dataframe(df, args.output)
    else:
        print(df)

    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    setup_logging(logging.DEBUG if args.verbose else logging.INFO)

    try:
        with AwinClient.from_env() as client:
            return run(args, client)
    except Exception as e:
        logger.error(f"❌ {args.command} failed: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
