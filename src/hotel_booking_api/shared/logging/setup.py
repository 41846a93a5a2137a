import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


class AuditEventFormatter(logging.Formatter):
    """Append the structured audit payload to audit log lines."""

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        audit_event = getattr(record, "audit_event", None)
        if audit_event is not None:
            message = f"{message} {audit_event}"
        return message


def configure_logging(level: str = "INFO") -> None:
    """Install a single stream handler on the root logger."""
    handler = logging.StreamHandler()
    handler.setFormatter(AuditEventFormatter(LOG_FORMAT))
    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level.upper())
