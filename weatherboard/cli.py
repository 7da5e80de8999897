"""CLI entry point for the weather dashboard."""

import argparse
import asyncio
import logging
from pathlib import Path

from weatherboard.config.defaults import DEFAULT_CONFIG
from weatherboard.config.loader import (
    get_config_value,
    load_config,
    redacted_dump,
)
from weatherboard.ingest.cwa_client import CwaClient
from weatherboard.models.common import ServiceStatus
from weatherboard.reporting.display import REGION_LABELS
from weatherboard.reporting.formatters import (
    format_cities_json,
    format_cities_text,
    format_summary_text,
)
from weatherboard.service.weather_service import REGION_FILTERS, WeatherService
from weatherboard.transform.regions import REGION_CATALOG


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="weatherboard",
        description="Taiwan county/city weather board",
    )
    parser.add_argument(
        "--config", default=None,
        help=f"Config YAML path (default: {DEFAULT_CONFIG} if present)",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Debug logging"
    )

    sub = parser.add_subparsers(dest="command")

    # refresh
    refresh_p = sub.add_parser("refresh", help="Run one refresh cycle")
    refresh_p.add_argument(
        "--region", choices=REGION_FILTERS, default=None,
        help="Only show cities in this region",
    )
    refresh_p.add_argument(
        "--json", action="store_true", help="Print cities as JSON"
    )

    # serve
    serve_p = sub.add_parser("serve", help="Run the dashboard API")
    serve_p.add_argument("--host", default=None)
    serve_p.add_argument("--port", type=int, default=None)

    # regions
    sub.add_parser("regions", help="List regions and their cities")

    # config show / config get
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config")
    get_p = config_sub.add_parser("get", help="Print one config value")
    get_p.add_argument("key", help="Dotted key, e.g. schedule.refresh_interval_minutes")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config_path = args.config
    if config_path is None and Path(DEFAULT_CONFIG).exists():
        config_path = DEFAULT_CONFIG
    try:
        config = load_config(config_path)
    except FileNotFoundError:
        print(f"Error: config file not found: {config_path}")
        return 1

    if args.command == "refresh":
        return _cmd_refresh(config, args)
    elif args.command == "serve":
        return _cmd_serve(config, args)
    elif args.command == "regions":
        return _cmd_regions()
    elif args.command == "config":
        return _cmd_config(config, args)
    else:
        parser.print_help()
        return 1


def _cmd_refresh(config, args) -> int:
    if not config.feed.api_key:
        print("Error: no API key; set feed.api_key or $CWA_API_KEY")
        return 1
    service = WeatherService(
        CwaClient.from_config(config.feed),
        default_region=args.region or config.display.default_region,
    )
    state = asyncio.run(service.refresh_weather())
    if state.status == ServiceStatus.ERROR:
        print(f"Error: {state.error}")
        return 1

    cities = service.filtered_cities
    if args.json:
        print(format_cities_json(cities))
    else:
        print(format_cities_text(cities))
        if service.last_summary is not None:
            print(format_summary_text(service.last_summary))
    return 0


def _cmd_serve(config, args) -> int:
    import uvicorn

    from weatherboard.dashboard import create_app

    app = create_app(config)
    uvicorn.run(
        app,
        host=args.host or config.dashboard.host,
        port=args.port or config.dashboard.port,
    )
    return 0


def _cmd_regions() -> int:
    for region in REGION_FILTERS[1:]:
        names = [n for n, r in REGION_CATALOG.items() if r == region]
        print(f"{region} ({REGION_LABELS[region]}): {', '.join(names) or '-'}")
    return 0


def _cmd_config(config, args) -> int:
    if args.config_command == "show":
        print(redacted_dump(config))
        return 0
    elif args.config_command == "get":
        if args.key == "feed.api_key":
            print("Error: feed.api_key is not printed; use config show")
            return 1
        try:
            value = get_config_value(config, args.key)
        except KeyError as e:
            print(f"Error: {e.args[0]}")
            return 1
        if hasattr(value, "model_dump_json"):
            print(value.model_dump_json(indent=2, exclude={"api_key"}))
        else:
            print(value)
        return 0
    print("Use: config show | config get KEY")
    return 1
