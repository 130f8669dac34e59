"""
Main CLI module with argument parsing and command execution.

This module provides the main CLI interface including:
- Command line argument parsing
- Logging and configuration bootstrap
- Demo routing and execution
"""
import argparse
import os
import sys
from typing import List, Optional

from patterncraft import __version__
from patterncraft.cli.demos import DEMOS
from patterncraft.config.manager import ConfigurationManager
from patterncraft.infrastructure.error import create_error_middleware
from patterncraft.infrastructure.logging.logger import get_logger, setup_logging
from patterncraft.infrastructure.patterns import get_singleton, register_singleton


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog=os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else "patterncraft",
        description="Creational design pattern demonstrations",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s demo builder                 # Build an immutable HTTP request
  %(prog)s demo prototype               # Clone and derive documents
  %(prog)s demo all --log-level DEBUG   # Run everything with debug logs
        """,
    )

    # Global options
    parser.add_argument("--config", help="Configuration file path (JSON)")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Override the configured log level",
    )
    parser.add_argument(
        "--log-format", choices=["console", "json"], help="Override the configured log renderer"
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    subparsers = parser.add_subparsers(dest="command", required=True, help="Available commands")

    demo_parser = subparsers.add_parser("demo", help="Run a pattern demonstration")
    demo_parser.add_argument("name", choices=sorted(DEMOS) + ["all"], help="Demo to run")

    return parser.parse_args(argv)


def _bootstrap(args: argparse.Namespace) -> ConfigurationManager:
    if args.config:
        manager = register_singleton(ConfigurationManager, ConfigurationManager(args.config))
    else:
        manager = get_singleton(ConfigurationManager)

    logging_config = manager.get_logging_config()
    overrides = {}
    if args.log_level:
        overrides["level"] = args.log_level
    if args.log_format:
        overrides["renderer"] = args.log_format
    if overrides:
        logging_config = logging_config.model_copy(update=overrides)

    setup_logging(logging_config)
    return manager


def _run(args: argparse.Namespace) -> int:
    manager = _bootstrap(args)
    logger = get_logger(__name__)

    names = sorted(DEMOS) if args.name == "all" else [args.name]
    for name in names:
        logger.info("Running demo", demo=name)
        print(f"=== {name} ===")
        if name == "singleton":
            DEMOS[name](manager=manager)
        else:
            DEMOS[name]()
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point. Returns the process exit status."""
    args = parse_args(argv)
    return create_error_middleware().wrap_script_handler(_run)(args)


if __name__ == "__main__":
    sys.exit(main())
