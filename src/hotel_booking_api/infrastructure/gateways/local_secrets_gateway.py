import asyncio
from pathlib import Path

from dotenv import dotenv_values

from hotel_booking_api.domain.exceptions import SecretNotFoundError, SecretsUnavailableError


class LocalSecretsGateway:
    """Read secrets from a dotenv-style `KEY=VALUE` file.

    The file is re-read on every lookup so rotated values apply immediately.
    """

    def __init__(self, path_to_file: str | Path) -> None:
        self._path = Path(path_to_file)

    async def get(self, key: str) -> str:
        values = await asyncio.to_thread(self._read_values)
        value = values.get(key)
        if value is None:
            raise SecretNotFoundError(f"secret {key} not found")
        return value

    def _read_values(self) -> dict[str, str | None]:
        if not self._path.is_file():
            raise SecretsUnavailableError(f"secrets file not found: {self._path}")
        try:
            return dotenv_values(self._path, encoding="utf-8")
        except (OSError, ValueError) as exc:
            raise SecretsUnavailableError(f"unable to read secrets file: {self._path}") from exc
