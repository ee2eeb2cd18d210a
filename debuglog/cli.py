"""
Command-line interface for debuglog.

Inspect, append to, export and clean up debug log files.
"""

import argparse
import dataclasses
import json
import sys

from .config import DEFAULT_CONFIG_PATH, create_default_config_file, load_config
from .export import ExportChoice, LogExporter
from .storage import LogReader, LogStore
from .types import LogCategory


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="debuglog - categorized in-app debug logs"
    )
    parser.add_argument("--config", "-c", help="Path to a JSON config file")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # init command
    subparsers.add_parser("init", help="Create default configuration file")

    # list command
    list_parser = subparsers.add_parser("list", help="List log files")
    list_parser.add_argument("--json", action="store_true", help="Output as JSON")

    # show command
    show_parser = subparsers.add_parser("show", help="Print a log file")
    show_parser.add_argument("file", nargs="?", help="Log file name (defaults to newest)")

    # log command
    log_parser = subparsers.add_parser("log", help="Append an entry to a new log file")
    log_parser.add_argument("message", nargs="+", help="Message parts")
    log_parser.add_argument("--category", default="none", help="Category name (info, warning, ...)")

    # export command
    export_parser = subparsers.add_parser("export", help="E-mail log files")
    export_parser.add_argument("choice", choices=[c.value for c in ExportChoice])
    export_parser.add_argument("--delete", action="store_true", help="Delete files once sent")
    export_parser.add_argument("--dry-run", action="store_true", help="Show what would be sent")

    # clean command
    clean_parser = subparsers.add_parser("clean", help="Delete old log files")
    clean_parser.add_argument("--keep", type=int, default=1, help="Newest files to keep")

    # status command
    subparsers.add_parser("status", help="Show configuration and log files")

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    if args.command == "init":
        create_default_config_file(args.config or DEFAULT_CONFIG_PATH)
        return 0

    try:
        config = load_config(args.config)
    except (OSError, ValueError, TypeError) as e:
        print(f"Error loading configuration: {e}", file=sys.stderr)
        return 1

    # The command line always works on files, whatever the preference says
    config = dataclasses.replace(config, file_logging=True)
    reader = LogReader(config.log_directory)

    if args.command == "list":
        files = reader.list_files()
        if args.json:
            print(json.dumps(files, indent=2))
        else:
            for name in files:
                print(f"  - {name}")

    elif args.command == "show":
        name = args.file or reader.latest()
        if name is None:
            print("No log files")
            return 1
        sys.stdout.write(reader.read(name))

    elif args.command == "log":
        try:
            category = LogCategory.from_name(args.category)
        except ValueError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1

        payload = args.message[0] if len(args.message) == 1 else args.message
        with LogStore(dataclasses.replace(config, enabled=True)) as store:
            store.log(payload, category)
            if store.active_log_path is None:
                return 1

    elif args.command == "export":
        store = LogStore(config)
        exporter = LogExporter(store)
        choice = ExportChoice(args.choice)

        if choice == ExportChoice.CURRENT:
            latest = reader.latest()
            filenames = [latest] if latest else []
        else:
            filenames = exporter.select(choice)

        bundle = exporter.build_message(filenames)
        if bundle.is_empty:
            print("Nothing to export")
            return 1

        if args.dry_run:
            print(f"To: {bundle.message['To'] or '-'}")
            print(f"Subject: {bundle.message['Subject']}")
            for name in bundle.attached:
                print(f"  - {name}")
            return 0

        if not exporter.send(bundle):
            print("Sending failed", file=sys.stderr)
            return 1
        print(f"Sent {len(bundle.attached)} log file(s)")

        if args.delete:
            deleted = exporter.delete_sent(bundle)
            print(f"Deleted {len(deleted)} log file(s)")

    elif args.command == "clean":
        if args.keep < 0:
            print("--keep must be non-negative", file=sys.stderr)
            return 1
        files = reader.list_files()
        old = files[:len(files) - args.keep] if args.keep else files
        store = LogStore(config)
        deleted = store.delete_log_files(old)
        print(f"Deleted {len(deleted)} log file(s)")

    elif args.command == "status":
        files = reader.list_files()
        status = {
            "config": config.to_dict(),
            "log_files": len(files),
            "latest": files[-1] if files else None,
        }
        print(json.dumps(status, indent=2))

    return 0


if __name__ == "__main__":
    sys.exit(main())
