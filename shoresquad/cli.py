"""CLI entry point for the beach-cleanup weather advisory."""

import argparse
import logging
import threading

from shoresquad.advisory.mapping import icon_for, recommendation_for
from shoresquad.advisory.scoring import rating_for, score
from shoresquad.config.loader import (
    get_config_value,
    load_config,
    save_config,
    set_config_value,
)
from shoresquad.daemon import AdvisoryDaemon
from shoresquad.display.applier import ConsoleDisplay, DisplayApplier, MemoryDisplay
from shoresquad.ingest.nea_client import NeaClient
from shoresquad.pipeline.advisory_pipeline import AdvisoryPipeline
from shoresquad.reporting.formatters import format_result_json
from shoresquad.reporting.health_checker import HealthChecker

DEFAULT_CONFIG = "ops/configs/default.yaml"


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="shoresquad",
        description="Beach cleanup weather advisory",
    )
    parser.add_argument(
        "--config", default=DEFAULT_CONFIG, help="Config YAML path"
    )

    sub = parser.add_subparsers(dest="command")

    # check
    check_p = sub.add_parser("check", help="Run the advisory pipeline once")
    check_p.add_argument("--json", action="store_true", help="Print JSON")

    # daemon
    daemon_p = sub.add_parser("daemon", help="Run the advisory on a schedule")
    daemon_p.add_argument(
        "--interval", type=int, default=None, help="Seconds between runs"
    )
    daemon_p.add_argument(
        "--serve", type=int, default=None, metavar="PORT",
        help="Also serve the advisory API on this port",
    )
    daemon_p.add_argument("--host", default="127.0.0.1", help="API bind address")

    # score
    score_p = sub.add_parser("score", help="Score conditions offline")
    score_p.add_argument("condition", help='Forecast text, e.g. "Partly Cloudy"')
    score_p.add_argument("temp_high", type=float, help="High temperature in C")
    score_p.add_argument("humidity", type=float, help="Relative humidity in %%")

    # health
    sub.add_parser("health", help="Check feed reachability")

    # config show / config set
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config")
    set_p = config_sub.add_parser("set", help="Set a config value")
    set_p.add_argument("keyvalue", help="key=value to set")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = load_config(args.config)

    if args.command == "check":
        return _cmd_check(config, args)
    elif args.command == "daemon":
        return _cmd_daemon(config, args)
    elif args.command == "score":
        return _cmd_score(config, args)
    elif args.command == "health":
        return _cmd_health(config, args)
    elif args.command == "config":
        return _cmd_config(config, args)
    else:
        parser.print_help()
        return 1


def _cmd_check(config, args) -> int:
    result = AdvisoryPipeline(config).run(run_seq=1)
    if args.json:
        print(format_result_json(result))
    else:
        DisplayApplier(ConsoleDisplay(), config.fallback.policy).apply(result)
        if result.is_fallback:
            print(f"(fallback: {result.error})")
    return 0 if not result.is_fallback else 1


def _cmd_daemon(config, args) -> int:
    if args.serve is not None:
        import uvicorn

        from shoresquad.dashboard import create_app

        display = MemoryDisplay()
        server = uvicorn.Server(
            uvicorn.Config(create_app(display), host=args.host, port=args.serve)
        )
        threading.Thread(target=server.run, name="advisory-api", daemon=True).start()
    else:
        display = ConsoleDisplay()

    AdvisoryDaemon(config, display, interval=args.interval).start()
    return 0


def _cmd_score(config, args) -> int:
    value = score(args.condition, args.temp_high, args.humidity, config.scoring)
    rating = rating_for(value, config.scoring)
    print(f"Score: {value} ({rating.value})")
    print(f"Icon: {icon_for(args.condition).value}")
    print(f"Advice: {recommendation_for(args.condition)}")
    return 0


def _cmd_health(config, args) -> int:
    client = NeaClient(base_url=config.feeds.base_url, user_agent=config.feeds.user_agent)
    status = HealthChecker(client).check()

    print(f"2-hour forecast: {'OK' if status.two_hour_forecast_reachable else 'FAIL'}")
    print(f"Air temperature: {'OK' if status.air_temperature_reachable else 'FAIL'}")
    print(f"4-day forecast: {'OK' if status.four_day_forecast_reachable else 'FAIL'}")
    return 0 if status.all_ok else 1


def _cmd_config(config, args) -> int:
    if args.config_command == "show":
        print(config.model_dump_json(indent=2))
        return 0
    elif args.config_command == "set":
        kv = args.keyvalue
        if "=" not in kv:
            print("Error: use key=value format")
            return 1
        key, value = kv.split("=", 1)
        try:
            new_config = set_config_value(config, key.strip(), value.strip())
            save_config(new_config, args.config)
            print(f"Set {key} = {get_config_value(new_config, key.strip())}")
            return 0
        except Exception as e:
            print(f"Error: {e}")
            return 1
    else:
        print("Use: config show | config set key=value")
        return 1
