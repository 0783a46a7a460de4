"""CLI entry point for beach swimming-safety reports."""

import argparse
import logging

from beachwatch.config.loader import load_config, save_config, set_config_value
from beachwatch.errors import MalformedPayloadError, NotFoundError, UpstreamUnavailableError
from beachwatch.locate.resolver import resolve
from beachwatch.locate.table import table_from_config
from beachwatch.pipeline.report_pipeline import BeachReportPipeline
from beachwatch.reporting.formatters import (
    format_report_chat,
    format_report_json,
    format_report_text,
)

DEFAULT_CONFIG = "configs/default.yaml"

FORMATTERS = {
    "text": format_report_text,
    "json": format_report_json,
    "chat": format_report_chat,
}


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="beachwatch",
        description="Swimming safety conditions for NYC public beaches",
    )
    parser.add_argument(
        "--config", default=DEFAULT_CONFIG, help="Config YAML path"
    )

    sub = parser.add_subparsers(dest="command")

    # beaches
    sub.add_parser("beaches", help="List supported beaches")

    # check
    check_p = sub.add_parser("check", help="Report current conditions for a beach")
    check_p.add_argument("beach", nargs="+", help='Beach name, e.g. "coney island"')
    check_p.add_argument(
        "--format", choices=sorted(FORMATTERS), default="text", help="Output format"
    )

    # config show / config set
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config")
    set_p = config_sub.add_parser("set", help="Set and save a config value")
    set_p.add_argument("keyvalue", help="key=value to set")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    config = load_config(args.config)

    logging.basicConfig(
        level=config.ops.log_level.value,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "beaches":
        return _cmd_beaches(config)
    elif args.command == "check":
        return _cmd_check(config, args)
    elif args.command == "config":
        return _cmd_config(config, args)
    else:
        parser.print_help()
        return 1


def _cmd_beaches(config) -> int:
    table = table_from_config(config)
    for entry in table.values():
        borough = f" [{entry.borough}]" if entry.borough else ""
        print(f"{entry.key}: {entry.display_name}{borough}")
    return 0


def _cmd_check(config, args) -> int:
    name = " ".join(args.beach)
    try:
        resolve(name, table_from_config(config))
        pipeline = BeachReportPipeline.from_config(config)
        report = pipeline.run(name)
    except NotFoundError as e:
        print(f"Error: {e}")
        return 2
    except (MalformedPayloadError, UpstreamUnavailableError) as e:
        print(f"Error: {e}")
        return 1
    print(FORMATTERS[args.format](report))
    return 0


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
            saved = save_config(new_config, args.config)
            print(f"Saved {key.strip()} = {value.strip()} to {saved}")
            return 0
        except Exception as e:
            print(f"Error: {e}")
            return 1
    else:
        print("Use: config show | config set key=value")
        return 1
