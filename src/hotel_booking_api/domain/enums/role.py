from enum import StrEnum


class Role(StrEnum):
    """Permission tier carried in the `role` claim of an access token."""

    ADMIN = "ADMIN"
    CUSTOMER = "CUSTOMER"
