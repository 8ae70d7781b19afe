"""Command line interface for the report proxy and the widget hosts."""

import asyncio
import json
import logging
import sys
from typing import Any

import aiohttp

from ga_active_users.adapters.config import AppConfig
from ga_active_users.adapters.web.hosts import ConsoleWidgetHost, HtmlDocumentHost
from ga_active_users.adapters.web.widget import initialize
from ga_active_users.domain.errors import ReportProxyError, WidgetConfigurationError
from ga_active_users.domain.models import WidgetConfiguration, WidgetPosition

logger = logging.getLogger(__name__)


def widget_options_from_args(args: Any, config: AppConfig) -> dict[str, Any]:
    """Merge command line widget options over configured defaults."""
    options = config.widget_options()
    options["apiUrl"] = args.api_url
    options["propertyId"] = args.property_id
    if args.interval is not None:
        options["reloadTimeInterval"] = args.interval
    if args.position is not None:
        options["position"] = args.position
    if args.title is not None:
        options["title"] = args.title
    return options


async def query(property_id: str, config: AppConfig, format_json: bool = False) -> int:
    """Run one realtime users query and print the result. Returns an exit code."""
    from ga_active_users.main import build_service

    service = build_service(config)
    try:
        realtime_count = await service.get_realtime_users(property_id)
    except ReportProxyError as e:
        print(f"Error ({e.status_code}): {e.message}", file=sys.stderr)
        return 1

    if format_json:
        print(json.dumps(realtime_count.to_dict(), indent=2))
    else:
        print(f"{realtime_count.active_users} active users on property {property_id}")
    return 0


async def watch(options: dict[str, Any]) -> int:
    """Show the widget in the terminal until interrupted."""
    try:
        position = WidgetConfiguration.from_options(options).position
    except WidgetConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    handle = await initialize(options, ConsoleWidgetHost(position=position))
    if handle is None:
        return 1
    try:
        await asyncio.Event().wait()
    finally:
        await handle.stop()
    return 0


async def render(options: dict[str, Any]) -> int:
    """Poll once and print the widget as an HTML document."""
    host = HtmlDocumentHost(page_title=options.get("title") or "")
    async with aiohttp.ClientSession() as session:
        handle = await initialize(options, host, session=session)
        if handle is None:
            return 1
        await handle.wait_first_poll()
        await handle.stop()
    print(host.render())
    return 0 if handle.state.status == "success" else 1


def _add_widget_arguments(parser: Any) -> None:
    parser.add_argument("--api-url", required=True, help="URL of the report proxy endpoint")
    parser.add_argument("--property-id", required=True, help="GA4 property id")
    parser.add_argument("--interval", type=int, help="Refresh interval in milliseconds")
    parser.add_argument(
        "--position",
        choices=[position.value for position in WidgetPosition],
        help="Screen corner for the widget",
    )
    parser.add_argument("--title", help="Title displayed on the widget")


async def main() -> None:
    """Main CLI entry point."""
    import argparse

    parser = argparse.ArgumentParser(
        description="GA4 realtime active users proxy and widget",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Run the report proxy
  GA4_PROPERTY_IDS=123,456 ga-active-users serve

  # Query a property once
  GA4_PROPERTY_IDS=123 ga-active-users query 123 --json

  # Watch the widget in the terminal
  ga-active-users watch --api-url http://localhost:8080/ --property-id 123

  # Render the widget HTML after one poll
  ga-active-users render --api-url http://localhost:8080/ --property-id 123
        """,
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    subparsers.add_parser("serve", help="Run the report proxy HTTP server")

    query_parser = subparsers.add_parser("query", help="Query active users for a property")
    query_parser.add_argument("property_id", help="GA4 property id")
    query_parser.add_argument("--json", action="store_true", help="Output as JSON")

    watch_parser = subparsers.add_parser("watch", help="Show the widget in the terminal")
    _add_widget_arguments(watch_parser)

    render_parser = subparsers.add_parser("render", help="Print the widget as HTML")
    _add_widget_arguments(render_parser)

    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )

    config = AppConfig()
    try:
        config.load_toml()
    except (FileNotFoundError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    try:
        if args.command == "serve":
            from ga_active_users.main import main as serve

            await serve()
            exit_code = 0
        elif args.command == "query":
            exit_code = await query(args.property_id, config, format_json=args.json)
        elif args.command == "watch":
            exit_code = await watch(widget_options_from_args(args, config))
        else:
            exit_code = await render(widget_options_from_args(args, config))
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        sys.exit(1)

    sys.exit(exit_code)


def cli_main() -> None:
    """Synchronous entry point for the CLI command."""
    asyncio.run(main())


if __name__ == "__main__":
    cli_main()
