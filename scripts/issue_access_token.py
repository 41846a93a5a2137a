from __future__ import annotations

import argparse
import asyncio
from datetime import UTC, datetime, timedelta
from uuid import UUID, uuid4

from hotel_booking_api.application import JWT_SIGNING_SECRET_KEY
from hotel_booking_api.domain.enums import Role
from hotel_booking_api.shared.config import ApplicationContainer, settings


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Mint a signed access token, e.g. an ADMIN token for room management.",
    )
    parser.add_argument("--role", choices=[role.value for role in Role], default=Role.ADMIN.value)
    parser.add_argument("--customer-id", type=UUID, default=None)
    parser.add_argument("--ttl-days", type=int, default=settings.access_token_ttl_days)
    return parser.parse_args()


async def issue_access_token(role: Role, customer_id: UUID, ttl: timedelta) -> str:
    """Sign a token with the secret held by the configured secrets gateway."""
    container = ApplicationContainer(settings)
    secret = await container.secrets_gateway.get(JWT_SIGNING_SECRET_KEY)
    issued_at = datetime.now(UTC)
    claims = {
        "customerId": str(customer_id),
        "role": role.value,
        "iat": issued_at,
        "exp": issued_at + ttl,
    }
    return container.token_codec.encode(claims, secret)


def main() -> None:
    args = _parse_args()
    token = asyncio.run(
        issue_access_token(
            role=Role(args.role),
            customer_id=args.customer_id or uuid4(),
            ttl=timedelta(days=args.ttl_days),
        )
    )
    print(token)


if __name__ == "__main__":
    main()
