from uuid import UUID

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class LoginResponseDTO(BaseModel):
    """Payload returned by `POST /api/login-with-email-and-password`."""

    customer_id: UUID
    customer_name: str
    access_token: str

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
