"""
Log Exporter - Sends log files by e-mail and cleans up afterwards.

The flow mirrors what a settings screen offers:
1. Pick what to send (all files, the previous run, the current run)
2. Build an e-mail with one text/plain attachment per file
3. Hand it to a transport
4. Optionally delete what was sent, except the file still in use
"""

import logging
import smtplib

from email.message import EmailMessage
from enum import Enum
from typing import Protocol

from .storage import LogReader, LogStore
from .types import ExportBundle, LogCategory, LoggerConfig

logger = logging.getLogger(__name__)


class ExportChoice(str, Enum):
    """Which log files to export."""

    ALL = "all"
    """Every log file in the directory."""

    LAST = "last"
    """The file of the previous run."""

    CURRENT = "current"
    """The file this run is writing."""

    def __str__(self) -> str:
        return self.value


class Transport(Protocol):
    """Anything able to deliver an EmailMessage."""

    def send(self, message: EmailMessage) -> None:
        ...


class SMTPTransport:
    """Deliver export e-mails through an SMTP server."""

    def __init__(self, host: str = "localhost", port: int = 25, timeout: float = 30.0):
        self.host = host
        self.port = port
        self.timeout = timeout

    @classmethod
    def from_config(cls, config: LoggerConfig) -> "SMTPTransport":
        return cls(config.smtp_host, config.smtp_port)

    def send(self, message: EmailMessage) -> None:
        with smtplib.SMTP(self.host, self.port, timeout=self.timeout) as smtp:
            smtp.send_message(message)


class LogExporter:
    """
    Packages log files of a LogStore for sending.

    Usage:
        exporter = LogExporter(store)
        bundle = exporter.export(ExportChoice.ALL, delete_after_send=True)
    """

    def __init__(self, store: LogStore, config: LoggerConfig | None = None):
        self.store = store
        self.config = config or store.config

    def available_choices(self) -> list[ExportChoice]:
        """
        Choices worth offering for the files on disk.

        With several files every choice makes sense; with a single one
        only the current run can be sent.
        """
        count = len(self.store.list_all_log_files())
        if count > 1:
            return [ExportChoice.ALL, ExportChoice.LAST, ExportChoice.CURRENT]
        if count == 1:
            return [ExportChoice.CURRENT]
        return []

    def select(self, choice: ExportChoice) -> list[str]:
        """File names covered by a choice, oldest first."""
        files = self.store.list_all_log_files()

        if choice == ExportChoice.ALL:
            return files

        if choice == ExportChoice.LAST:
            # Newest file is the current run, the one before it the previous run
            return [files[-2]] if len(files) >= 2 else []

        current = self.store.active_log_filename
        return [current] if current else []

    def build_message(self, filenames: list[str]) -> ExportBundle:
        """
        Build the e-mail for a set of log files.

        Files that cannot be read are left out. Every attached file
        except the active one is marked for deletion after sending.
        """
        message = EmailMessage()
        message["Subject"] = self.config.mail_subject
        message["From"] = self.config.mail_sender
        if self.config.recipients:
            message["To"] = ", ".join(self.config.recipients)
        message.set_content(f"{self.config.app_name} debug logs attached.")

        bundle = ExportBundle(message=message)
        directory = self.store.log_directory
        if directory is None:
            return bundle

        reader = LogReader(directory)
        active = self.store.active_log_filename
        for filename in filenames:
            data = reader.read_bytes(filename)
            if data is None:
                continue

            message.add_attachment(data, maintype="text", subtype="plain", filename=filename)
            bundle.attached.append(filename)
            if filename != active:
                bundle.to_delete.append(filename)

        return bundle

    def send(self, bundle: ExportBundle, transport: Transport | None = None) -> bool:
        """
        Hand the bundle to a transport.

        Returns:
            True if the transport accepted the message
        """
        transport = transport or SMTPTransport.from_config(self.config)
        try:
            transport.send(bundle.message)
        except (OSError, smtplib.SMTPException) as e:
            self.store.log(f"Cannot send debug logs: {e}", LogCategory.ERROR)
            return False

        bundle.sent = True
        return True

    def delete_sent(self, bundle: ExportBundle) -> list[str]:
        """
        Delete the files of a sent bundle, except the active one.

        Returns:
            Names that were deleted
        """
        if not bundle.sent:
            logger.warning("Refusing to delete logs of a bundle that was not sent")
            return []

        deleted = self.store.delete_log_files(bundle.to_delete)
        bundle.to_delete = [f for f in bundle.to_delete if f not in deleted]
        return deleted

    def export(
        self,
        choice: ExportChoice,
        transport: Transport | None = None,
        delete_after_send: bool = False,
    ) -> ExportBundle | None:
        """
        Run the whole flow for a choice.

        Returns:
            The bundle, or None when there was nothing to attach
        """
        bundle = self.build_message(self.select(choice))
        if bundle.is_empty:
            return None

        if self.send(bundle, transport) and delete_after_send:
            self.delete_sent(bundle)

        return bundle
