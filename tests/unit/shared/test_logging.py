import logging
from datetime import UTC, datetime

from hotel_booking_api.shared.logging import AuditLogger, configure_logging
from hotel_booking_api.shared.logging.setup import AuditEventFormatter

FIXED_NOW = datetime(2026, 5, 4, 9, 30, tzinfo=UTC)


def test_audit_logger_emits_structured_event_with_masked_email(caplog) -> None:
    audit = AuditLogger(clock=lambda: FIXED_NOW)

    with caplog.at_level(logging.INFO, logger="hotel_booking_api.audit"):
        audit.log_customer_signed_up(customer_id="c-1", email="john.doe@gmail.com")

    record = caplog.records[0]
    assert record.levelno == logging.INFO
    assert record.audit_event == {
        "timestamp": "2026-05-04T09:30:00+00:00",
        "action": "CUSTOMER_SIGNED_UP",
        "subject_id": "c-1",
        "actor": "c-1",
        "context": {"email": "j***@gmail.com"},
    }


def test_failed_login_is_logged_as_warning(caplog) -> None:
    audit = AuditLogger(clock=lambda: FIXED_NOW)

    with caplog.at_level(logging.INFO, logger="hotel_booking_api.audit"):
        audit.log_login_failed(email="john.doe@gmail.com")

    record = caplog.records[0]
    assert record.levelno == logging.WARNING
    assert record.audit_event["actor"] == "anonymous"
    assert record.audit_event["subject_id"] is None


def test_room_created_event_keeps_room_number(caplog) -> None:
    audit = AuditLogger(clock=lambda: FIXED_NOW)

    with caplog.at_level(logging.INFO, logger="hotel_booking_api.audit"):
        audit.log_room_created(room_id="r-1", number="101")

    assert caplog.records[0].audit_event["context"] == {"number": "101"}


def test_formatter_appends_audit_payload() -> None:
    formatter = AuditEventFormatter("%(levelname)s %(message)s")
    record = logging.LogRecord("audit", logging.INFO, __file__, 1, "audit_event", None, None)
    record.audit_event = {"action": "ROOM_CREATED"}

    assert formatter.format(record) == "INFO audit_event {'action': 'ROOM_CREATED'}"


def test_configure_logging_installs_single_handler() -> None:
    root = logging.getLogger()
    previous_handlers, previous_level = list(root.handlers), root.level
    try:
        configure_logging("debug")
        configure_logging("warning")

        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, AuditEventFormatter)
        assert root.level == logging.WARNING
    finally:
        root.handlers[:] = previous_handlers
        root.setLevel(previous_level)
