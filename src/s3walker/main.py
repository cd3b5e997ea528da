import argparse
import logging
from importlib.metadata import version

from rich.console import Console

from .core import DEFAULT_REGION, DEFAULT_WORKBOOK, START_COL, START_ROW
from .logger import logger, setup_logger
from .modes import inventory


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="S3Walker: S3 Bucket Inventory & Classification Tool",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Inventory us-east-1 into the default workbook template
  s3walker

  # Use a named profile and another template
  s3walker --profile audit --workbook reports/inventory.xlsx

  # Print the collected records as JSON as well
  s3walker --json
""",
    )
    try:
        ver = version("s3walker")
    except Exception:
        ver = "unknown"
    parser.add_argument("--version", action="version", version=f"S3Walker v{ver}")

    parser.add_argument(
        "--region",
        default=DEFAULT_REGION,
        help=f"Region whose buckets are inventoried (default: {DEFAULT_REGION})",
    )
    parser.add_argument("--profile", help="AWS named profile to use")
    parser.add_argument(
        "--workbook",
        default=str(DEFAULT_WORKBOOK),
        help=f"Existing .xlsx template to fill in (default: {DEFAULT_WORKBOOK})",
    )
    parser.add_argument(
        "--start-row",
        type=int,
        default=START_ROW,
        help=f"First row written in the sheet (default: {START_ROW})",
    )
    parser.add_argument(
        "--start-col",
        type=int,
        default=START_COL,
        help=f"First column written in the sheet (default: {START_COL})",
    )
    parser.add_argument("--json", action="store_true", help="Output results as JSON")
    parser.add_argument(
        "--limit",
        type=int,
        default=20,
        help="Number of rows to display in terminal table (default: 20)",
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Log every AWS lookup (debug level)"
    )
    return parser


def main() -> None:
    parser = build_parser()
    args = parser.parse_args()

    if args.verbose:
        setup_logger(level=logging.DEBUG)

    # Use stderr for logs/progress if stdout is piped for JSON
    log_console = Console(stderr=True, quiet=args.json)
    out_console = Console(quiet=args.json)

    log_console.print("[bold green]S3Walker[/bold green] inventory initialized.")

    try:
        inventory.run_inventory(args, log_console, out_console)
    except KeyboardInterrupt:
        Console(stderr=True).print(
            "\n[bold red]Operation cancelled by user.[/bold red]"
        )
        exit(130)
    except Exception as e:
        logger.error(f"Inventory Failed: {e}")
        exit(1)


if __name__ == "__main__":
    main()
