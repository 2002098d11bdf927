"""Command line entry point for the Datadog API client."""

import argparse
import asyncio
import json
import logging
import sys
from typing import List, Optional

import structlog

from .api import DatadogAPI
from .client import Client
from .config import DatadogConfig
from .exceptions import ConfigurationError, DatadogError
from .models.monitors import MonitorsSearchRequest
from .models.security_monitoring import ListRulesRequest


EXIT_OK = 0
EXIT_API_ERROR = 1
EXIT_CONFIG_ERROR = 2


def setup_logging(config: DatadogConfig) -> None:
    """Set up structured logging based on configuration."""
    logging.basicConfig(level=getattr(logging, config.log_level), stream=sys.stderr)

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if config.log_format == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="datadog-api",
        description="Query the Datadog API from the command line",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Environment Variables:
  DD_API_KEY           Datadog API key (required)
  DD_APP_KEY           Datadog application key (required)
  DATADOG_HOST         API host (default: https://api.datadoghq.com,
                       use https://api.datadoghq.eu for the EU site)
  DATADOG_LOG_LEVEL    Log level: DEBUG, INFO, WARNING, ERROR, CRITICAL (default: INFO)
  DATADOG_LOG_FORMAT   Log format: json, text (default: json)

Examples:
  datadog-api validate
  datadog-api search-monitors "type:metric status:alert" --per-page 50
  datadog-api list-rules --page-size 5 --page-number 2
        """
    )

    parser.add_argument(
        "--env-file",
        help="Path to a .env file (process environment takes precedence)"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("validate", help="Check that the API key is valid")

    search = subparsers.add_parser("search-monitors", help="Print every monitor matching a query")
    search.add_argument("query", help="Monitor search query, e.g. 'type:metric status:alert'")
    search.add_argument("--per-page", type=int, help="Monitors fetched per page")
    search.add_argument("--sort", help="Sort order, e.g. name,asc")

    rules = subparsers.add_parser("list-rules", help="Print one page of security rules")
    rules.add_argument("--page-size", type=int, help="Rules per page")
    rules.add_argument("--page-number", type=int, help="Page number to return")

    return parser.parse_args(argv)


def _print_json(data) -> None:
    print(json.dumps(data, sort_keys=True))


async def run_command(args: argparse.Namespace, api: DatadogAPI) -> None:
    """Execute one sub-command and print its result as JSON."""
    if args.command == "validate":
        response = await api.authentication.validate()
        _print_json(response.to_wire())

    elif args.command == "search-monitors":
        request = MonitorsSearchRequest(query=args.query, per_page=args.per_page, sort=args.sort)
        async for monitor in api.monitors.iter_search(request):
            _print_json(monitor.to_wire())

    elif args.command == "list-rules":
        request = ListRulesRequest(page_size=args.page_size, page_number=args.page_number)
        response = await api.security_monitoring.list_rules(request)
        _print_json(response.to_wire())


async def main_async(args: argparse.Namespace, client: Optional[Client] = None) -> int:
    """Async main function. Returns the process exit code."""
    if client is None:
        try:
            config = DatadogConfig.from_env(args.env_file)
        except ConfigurationError as e:
            print(f"Configuration error: {e}", file=sys.stderr)
            print("\nRequired environment variables:", file=sys.stderr)
            print("  export DD_API_KEY='your_api_key'", file=sys.stderr)
            print("  export DD_APP_KEY='your_application_key'", file=sys.stderr)
            return EXIT_CONFIG_ERROR
        client = Client(config)

    setup_logging(client.config)
    logger = structlog.get_logger(__name__)

    async with DatadogAPI(client) as api:
        try:
            await run_command(args, api)
        except DatadogError as e:
            logger.error("Datadog API call failed", command=args.command, error=str(e))
            print(f"Error: {e}", file=sys.stderr)
            return EXIT_API_ERROR

    return EXIT_OK


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for the command line."""
    args = parse_arguments(argv)
    try:
        exit_code = asyncio.run(main_async(args))
    except KeyboardInterrupt:
        exit_code = EXIT_API_ERROR
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
