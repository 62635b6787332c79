"""Sistema da Padaria console entry point.

Seeds the bakery catalog, demonstrates the catalog operations and
prints the system menu.

Usage:
    padaria
    padaria --no-demo
    padaria --show-logs 20
    python -m padaria
"""

import argparse
import asyncio
import sys

import structlog

from padaria.application.bakery_system import create_system
from padaria.infrastructure.config import Settings, settings as default_settings
from padaria.infrastructure.logging_config import configure_logging

logger = structlog.get_logger()


def non_negative_int(value: str) -> int:
    """Argparse type for counts that cannot be negative."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}") from None
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {number}")
    return number


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="padaria",
        description="Bakery catalog demonstration",
    )
    parser.add_argument(
        "--no-demo",
        action="store_true",
        help="Only seed the catalog, skip the feature demonstration",
    )
    parser.add_argument(
        "--show-logs",
        type=non_negative_int,
        default=0,
        metavar="N",
        help="Print the last N activity log entries after the run",
    )
    return parser.parse_args(argv)


async def main(argv: list[str] | None = None, settings: Settings | None = None) -> int:
    """Main entry point.

    Args:
        argv: Command line arguments (defaults to sys.argv).
        settings: Settings override, mainly for tests.

    Returns:
        Process exit status: 1 if initialization failed, 0 otherwise.
    """
    args = parse_args(argv)
    settings = settings or default_settings
    configure_logging(settings)

    logger.info("Starting bakery system", app_name=settings.app_name, debug=settings.debug)

    system = create_system(settings)
    try:
        await system.init(demonstrate=not args.no_demo)
    except Exception as exc:
        logger.exception("Fatal initialization error", error=str(exc))
        print(f"✗ Erro fatal: {exc}", file=sys.stderr)
        return 1

    system.show_menu()
    if args.show_logs:
        system.show_logs(args.show_logs)

    print()
    print(f"Obrigado por usar o {settings.app_name}!")
    return 0


def run() -> None:
    """Console script entry point."""
    sys.exit(asyncio.run(main()))


if __name__ == "__main__":
    run()
