import logging
from collections.abc import Callable, Mapping
from datetime import UTC, datetime
from typing import Any


class AuditLogger:
    """Structured audit logger with automatic sensitive-data masking.

    Example:
        ```python
        audit = AuditLogger()
        audit.log_room_created(room_id="0b6f...", number="101")
        ```
    """

    def __init__(
        self,
        logger: logging.Logger | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._logger = logger or logging.getLogger("hotel_booking_api.audit")
        self._clock = clock or (lambda: datetime.now(UTC))

    def log_customer_signed_up(self, *, customer_id: str, email: str) -> None:
        self._emit(
            action="CUSTOMER_SIGNED_UP",
            subject_id=customer_id,
            actor=customer_id,
            context={"email": email},
        )

    def log_customer_logged_in(self, *, customer_id: str) -> None:
        self._emit(
            action="CUSTOMER_LOGGED_IN",
            subject_id=customer_id,
            actor=customer_id,
            context={},
        )

    def log_login_failed(self, *, email: str) -> None:
        self._emit(
            action="LOGIN_FAILED",
            subject_id=None,
            actor="anonymous",
            context={"email": email},
            level=logging.WARNING,
        )

    def log_room_created(self, *, room_id: str, number: str, actor: str = "admin") -> None:
        self._emit(
            action="ROOM_CREATED",
            subject_id=room_id,
            actor=actor,
            context={"number": number},
        )

    def _emit(
        self,
        *,
        action: str,
        subject_id: str | None,
        actor: str,
        context: Mapping[str, Any],
        level: int = logging.INFO,
    ) -> None:
        event = {
            "timestamp": self._clock().astimezone(UTC).isoformat(),
            "action": action,
            "subject_id": subject_id,
            "actor": actor,
            "context": self.mask_sensitive_data(dict(context)),
        }
        self._logger.log(level, "audit_event", extra={"audit_event": event})

    @classmethod
    def mask_sensitive_data(cls, value: Any, key: str | None = None) -> Any:
        """Recursively mask sensitive values based on key names."""
        if isinstance(value, dict):
            return {k: cls.mask_sensitive_data(v, key=k) for k, v in value.items()}
        if isinstance(value, list):
            return [cls.mask_sensitive_data(item, key=key) for item in value]
        if isinstance(value, tuple):
            return tuple(cls.mask_sensitive_data(item, key=key) for item in value)
        if isinstance(value, str) and cls._is_sensitive_key(key):
            return cls._mask_string(value, key or "")
        return value

    @staticmethod
    def _is_sensitive_key(key: str | None) -> bool:
        if not key:
            return False
        lowered = key.lower()
        sensitive_tokens = (
            "email",
            "authorization",
            "cookie",
            "token",
            "password",
            "secret",
        )
        return any(token in lowered for token in sensitive_tokens)

    @staticmethod
    def _mask_string(raw: str, key: str) -> str:
        if "email" in key.lower():
            local_part, _, domain = raw.partition("@")
            if not domain:
                return "***"
            prefix = local_part[:1] or "*"
            return f"{prefix}***@{domain}"
        return "***MASKED***"
