from hotel_booking_api.infrastructure.gateways.aws_secrets_gateway import AwsSecretsGateway
from hotel_booking_api.infrastructure.gateways.environment_secrets_gateway import (
    EnvironmentSecretsGateway,
)
from hotel_booking_api.infrastructure.gateways.local_secrets_gateway import LocalSecretsGateway
from hotel_booking_api.infrastructure.gateways.sql_customers_gateway import SQLCustomersGateway

__all__ = [
    "AwsSecretsGateway",
    "EnvironmentSecretsGateway",
    "LocalSecretsGateway",
    "SQLCustomersGateway",
]
