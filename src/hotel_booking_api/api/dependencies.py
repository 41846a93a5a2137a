from typing import Annotated

from fastapi import Depends, Request

from hotel_booking_api.api.security import TokenAuthorizer
from hotel_booking_api.api.validation import FieldValidator
from hotel_booking_api.shared.config import ApplicationContainer


def get_container(request: Request) -> ApplicationContainer:
    return request.app.state.container


ContainerDependency = Annotated[ApplicationContainer, Depends(get_container)]


def get_field_validator(container: ContainerDependency) -> FieldValidator:
    return container.field_validator


def get_token_authorizer(container: ContainerDependency) -> TokenAuthorizer:
    return container.token_authorizer
