import asyncio
import json
from typing import Any

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from hotel_booking_api.domain.exceptions import SecretNotFoundError, SecretsUnavailableError


class AwsSecretsGateway:
    """Read keys from one JSON secret stored in AWS Secrets Manager.

    The secret is fetched on every lookup so rotations apply without a
    restart. String, number and boolean values are returned as text.

    Example:
        ```python
        gateway = AwsSecretsGateway("hotel-booking/prod", region_name="us-east-1")
        signing_secret = await gateway.get("JWT_SIGNING_ACCESS_TOKEN")
        ```
    """

    def __init__(
        self,
        secret_name: str,
        region_name: str | None = None,
        client: Any | None = None,
    ) -> None:
        self._secret_name = secret_name
        self._region_name = region_name
        self._client = client

    async def get(self, key: str) -> str:
        values = await asyncio.to_thread(self._read_values)
        if key not in values:
            raise SecretNotFoundError(f"secret {key} not found")
        return self._as_text(key, values[key])

    def _read_values(self) -> dict[str, Any]:
        if not self._secret_name:
            raise SecretsUnavailableError("AWS secret name is not configured")
        try:
            response = self._secrets_client().get_secret_value(SecretId=self._secret_name)
        except (ClientError, BotoCoreError) as exc:
            raise SecretsUnavailableError(
                f"unable to read secret {self._secret_name}: {exc}"
            ) from exc
        try:
            values = json.loads(response.get("SecretString") or "")
        except ValueError as exc:
            raise SecretsUnavailableError(
                f"secret {self._secret_name} is not a JSON object"
            ) from exc
        if not isinstance(values, dict):
            raise SecretsUnavailableError(f"secret {self._secret_name} is not a JSON object")
        return values

    def _secrets_client(self) -> Any:
        if self._client is None:
            self._client = boto3.client("secretsmanager", region_name=self._region_name)
        return self._client

    @staticmethod
    def _as_text(key: str, value: Any) -> str:
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (str, int, float)):
            return str(value)
        raise SecretsUnavailableError(f"secret {key} must be a string, number or boolean")
