from dataclasses import dataclass, field
from uuid import UUID, uuid4


@dataclass(slots=True, frozen=True)
class Customer:
    """Registered customer. Holds the password hash, never the plaintext."""

    name: str
    email: str
    hashed_password: str
    id: UUID = field(default_factory=uuid4)
