import hashlib

import bcrypt

BCRYPT_MAX_PASSWORD_BYTES = 72


def _prepare_password(plain_password: str) -> bytes:
    """Pre-hash passwords longer than bcrypt's 72-byte input limit."""
    password_bytes = plain_password.encode("utf-8")
    if len(password_bytes) > BCRYPT_MAX_PASSWORD_BYTES:
        return hashlib.sha256(password_bytes).hexdigest().encode("ascii")
    return password_bytes


class BcryptPasswordHasher:
    """bcrypt password hashing with a configurable cost factor."""

    def __init__(self, rounds: int = 12) -> None:
        if not 4 <= rounds <= 31:
            raise ValueError("rounds must be between 4 and 31")
        self._rounds = rounds

    def hash(self, plain_password: str) -> str:
        salt = bcrypt.gensalt(rounds=self._rounds)
        return bcrypt.hashpw(_prepare_password(plain_password), salt).decode("utf-8")

    def verify(self, plain_password: str, hashed_password: str) -> bool:
        try:
            return bcrypt.checkpw(
                _prepare_password(plain_password),
                hashed_password.encode("utf-8"),
            )
        except ValueError:
            # Malformed stored hash.
            return False
