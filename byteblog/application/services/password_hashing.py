"""Password hashing strategies."""

from __future__ import annotations

from werkzeug.security import check_password_hash, generate_password_hash

from byteblog.domain.users.repositories import PasswordHasher
from byteblog.shared.errors import HashError, VerifyError

MAX_PASSWORD_LENGTH = 1024
DEFAULT_COST = 15


class WerkzeugPasswordHasher(PasswordHasher):
    """Salted scrypt digests in werkzeug's ``method$salt$hash`` format.

    ``cost`` is the base-2 logarithm of scrypt's N parameter, so each step
    doubles the work needed to compute (and to brute force) a digest.
    """

    def __init__(self, cost: int = DEFAULT_COST, *, salt_length: int = 16) -> None:
        if not 1 <= cost <= 20:
            raise ValueError(f"cost must be between 1 and 20, got {cost}")
        self._method = f"scrypt:{2 ** cost}:8:1"
        self._salt_length = salt_length

    @property
    def method(self) -> str:
        return self._method

    def hash(self, password: str) -> str:
        if not isinstance(password, str):
            raise HashError("password_not_a_string")
        if not password:
            raise HashError("password_empty")
        if len(password) > MAX_PASSWORD_LENGTH:
            raise HashError("password_too_long")
        try:
            return str(
                generate_password_hash(
                    password, method=self._method, salt_length=self._salt_length
                )
            )
        except ValueError as exc:
            raise HashError("hash_failed") from exc

    def verify(self, password: str, hashed: str) -> bool:
        if not isinstance(password, str) or not isinstance(hashed, str):
            return False
        if not password or len(password) > MAX_PASSWORD_LENGTH:
            return False
        if hashed.count("$") < 2:
            return False
        try:
            return bool(check_password_hash(hashed, password))
        except (ValueError, TypeError) as exc:
            # structure parsed but the method or its parameters are unusable
            raise VerifyError("corrupted_digest") from exc
