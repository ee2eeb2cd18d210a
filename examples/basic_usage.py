"""
Example: Using debuglog in an application.

This example demonstrates:
1. Building the store at the composition root
2. Logging with categories and sequence payloads
3. Watching new entries through the notification center
4. Forwarding to remote backends
5. Exporting log files (dry run, no e-mail is sent)
"""

import random

# Add parent to path for running without install
import sys
sys.path.insert(0, "..")

from debuglog import (
    LOG_ADDED,
    DebugLog,
    ExportChoice,
    LogCategory,
    LogExporter,
    LoggerConfig,
    LogLevel,
    LogStore,
    RecordingLogger,
    RemoteLogger,
)


class PrintTransport:
    """Stands in for SMTP in this demo."""

    def send(self, message) -> None:
        print(f"Would send {message['Subject']!r} with attachments:")
        for part in message.iter_attachments():
            print(f"  - {part.get_filename()}")


def main():
    # Create configuration
    config = LoggerConfig(
        app_name="DemoApp",
        log_directory="./demo_logs",
        enabled=True,
        file_logging=True,
        mail_recipients="dev@example.com;qa@example.com",
    )

    store = LogStore(config)
    remote = RemoteLogger([RecordingLogger()])
    dlog = DebugLog(store, remote_logger=remote)

    # An in-app viewer would subscribe like this
    viewer: list[str] = []
    store.notifications.subscribe(LOG_ADDED, lambda log: viewer.append(log))

    print("=== Logging ===")

    dlog.log("app launched", LogCategory.START)
    dlog.log(["GET", "/api/items", {"page": 1}], LogCategory.REQUEST)
    dlog.log(["200 OK", random.randint(10, 40), "items"], LogCategory.RESPONSE)
    dlog.log("first line\nsecond line", LogCategory.INFO)
    dlog.warning("cache almost full")
    dlog.log("checkout failed", LogCategory.ERROR, level=LogLevel.CRITICAL)

    print(f"\nViewer received {len(viewer)} entries")
    print(f"Remote backend received {len(remote.loggers[0].records)} calls")

    print("\n=== Files ===")
    for name in store.list_all_log_files():
        print(f"  - {name}")

    print("\n=== Export ===")
    exporter = LogExporter(store)
    print(f"Choices: {[str(c) for c in exporter.available_choices()]}")
    exporter.export(ExportChoice.CURRENT, transport=PrintTransport())

    store.close()


if __name__ == "__main__":
    main()
