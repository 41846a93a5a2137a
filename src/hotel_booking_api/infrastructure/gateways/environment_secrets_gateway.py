import os
from collections.abc import Mapping

from hotel_booking_api.domain.exceptions import SecretNotFoundError


class EnvironmentSecretsGateway:
    """Read secrets from process environment variables."""

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = os.environ if environ is None else environ

    async def get(self, key: str) -> str:
        value = self._environ.get(key)
        if value is None:
            raise SecretNotFoundError(f"secret {key} not found")
        return value
