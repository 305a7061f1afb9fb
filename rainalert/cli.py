"""CLI entry point for the rain alert job."""

import argparse
import logging

from rainalert.config.loader import ConfigError, load_config, resolve_config_path
from rainalert.config.schema import JobConfig
from rainalert.models.run import RunStatus
from rainalert.pipeline.rain_alert_job import run_job


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="rainalert",
        description="Check the hourly forecast and push a rain alert",
    )
    parser.add_argument(
        "--config", default=None,
        help="Config YAML path (default: $CONFIG_PATH or ops/configs/default.yaml)",
    )
    parser.add_argument("--verbose", action="store_true", help="Log every forecast hour")

    sub = parser.add_subparsers(dest="command")

    # run
    run_p = sub.add_parser("run", help="Run one forecast check")
    run_p.add_argument(
        "--force", action="store_true", help="Ignore ntfy_times and run now"
    )

    # validate-config
    sub.add_parser("validate-config", help="Validate and print the config")

    # config show
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display the validated config as JSON")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config_path = args.config or resolve_config_path()

    if args.command == "run":
        return _cmd_run(config_path, args)
    elif args.command == "validate-config":
        return _cmd_validate(config_path)
    elif args.command == "config":
        return _cmd_config(config_path, args)
    else:
        parser.print_help()
        return 1


def _cmd_run(config_path, args) -> int:
    result = run_job(config_path, force=args.force)
    print(f"Status: {result.status}")
    if result.decision is not None:
        print(
            f"Rain expected: {result.decision.rain_expected} | "
            f"Peak: {result.decision.peak_precipitation_in:.2f} in"
        )
    if result.error is not None:
        print(f"Error: {result.error}")
    if result.notification_error:
        print(f"Notification error: {result.notification_error}")
    return 1 if result.status == RunStatus.FAILED else 0


def _cmd_validate(config_path) -> int:
    try:
        config = load_config(config_path)
    except ConfigError as e:
        print(f"Invalid config: {e}")
        return 1
    print(format_settings(config))
    return 0


def _cmd_config(config_path, args) -> int:
    if args.config_command != "show":
        print("Use: config show")
        return 1
    try:
        config = load_config(config_path)
    except ConfigError as e:
        print(f"Invalid config: {e}")
        return 1
    print(config.model_dump_json(indent=2))
    return 0


def format_settings(config: JobConfig) -> str:
    hours = ",".join(str(h) for h in sorted(config.ntfy_times))
    lines = [
        "=" * 40,
        "Configuration Settings",
        "-" * 40,
        f"Location           : {config.latitude:.4f}, {config.longitude:.4f}",
        f"Timezone           : {config.timezone}",
        f"Forecast range     : {config.forecast_range_hrs} hours",
        f"Notification hours : {hours}",
        f"Ntfy topic         : {config.ntfy_topic}",
        f"Ignore no rain     : {config.ignore_no_rain}",
        "=" * 40,
    ]
    if config.location:
        lines.insert(3, f"Name               : {config.location}")
    return "\n".join(lines)
