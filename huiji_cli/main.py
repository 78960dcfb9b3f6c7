"""
CLI Main Entry Point

Parses command-line arguments and dispatches to subcommands.

Usage:
    python -m huiji_cli [--endpoint URL] [--config PATH] get KEY=VALUE ...
    python -m huiji_cli [--endpoint URL] [--config PATH] post KEY=VALUE ...
    python -m huiji_cli [--endpoint URL] [--config PATH] query KEY=VALUE ...

Environment Variables:
    HUIJI_API_ENDPOINT      api.php URL used when --endpoint is absent
    HUIJI_USER_AGENT        User-Agent override
    HUIJI_TIMEOUT           Request timeout in seconds
    HUIJI_HTTP_PROXY        HTTP proxy URL
    HUIJI_LOG_LEVEL         Log level (default: INFO)
"""

from __future__ import annotations

import argparse
import logging
import sys
import traceback
from pathlib import Path
from typing import Sequence

from huiji import __version__
from huiji.config import ClientConfig
from huiji_cli import EXIT_RUNTIME_ERROR
from huiji_cli.commands import request


def setup_logging(level: str = "INFO", log_file: str | None = None) -> None:
    """Configure logging for the CLI."""
    log_level = getattr(logging, level.upper(), logging.INFO)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]

    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=handlers,
    )


def load_config(path: Path | None) -> ClientConfig:
    """Load a YAML config file when given, then overlay environment variables."""
    if path is None:
        return ClientConfig.from_env()
    return ClientConfig.from_yaml(path).with_env_overrides()


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="huiji",
        description="Send requests to a MediaWiki action API endpoint.",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "--endpoint", "-e",
        type=str,
        default=None,
        help="api.php URL (overrides config and HUIJI_API_ENDPOINT)",
    )
    parser.add_argument(
        "--config", "-c",
        type=Path,
        default=None,
        help="Path to a YAML configuration file",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level (overrides config)",
    )
    parser.add_argument(
        "--log-file",
        type=str,
        default=None,
        help="Also write log output to this file",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Print tracebacks on failure",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    for name, help_text in (
        ("get", "Send a GET request"),
        ("post", "Send a POST request with a form body"),
        ("query", "Send action=query and print only the query payload"),
    ):
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument(
            "params",
            nargs="*",
            metavar="KEY=VALUE",
            help="Request parameter; repeat a key for multiple values, bare KEY for a flag",
        )
        sub.set_defaults(func=request.cmd_request)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """
    Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0=success, 1=error, 2=API error)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return EXIT_RUNTIME_ERROR

    try:
        config = load_config(args.config)
    except Exception as e:
        print(f"Error loading configuration: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    setup_logging(level=args.log_level or config.log_level, log_file=args.log_file)

    args.client_config = config

    try:
        return args.func(args)
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        return EXIT_RUNTIME_ERROR
    except Exception as e:
        if args.debug:
            traceback.print_exc()
        else:
            print(f"Error: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR


if __name__ == "__main__":
    sys.exit(main())
