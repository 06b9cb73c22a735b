"""Password hashing strategies."""

from __future__ import annotations

from werkzeug.security import check_password_hash, generate_password_hash

from reviewhub.domain.users.exceptions import CorruptPasswordHashError
from reviewhub.domain.users.repositories import PasswordHasher

_KNOWN_METHODS = ("pbkdf2", "scrypt")


class WerkzeugPasswordHasher(PasswordHasher):
    """Salted PBKDF2-SHA256 via werkzeug; ``cost`` is the iteration count."""

    def __init__(self, cost: int = 600_000, *, salt_length: int = 16) -> None:
        if cost < 1:
            raise ValueError("cost must be a positive integer")
        self._method = f"pbkdf2:sha256:{cost}"
        self._salt_length = salt_length

    def hash(self, password: str) -> str:
        return str(
            generate_password_hash(password, method=self._method, salt_length=self._salt_length)
        )

    def verify(self, password: str, hashed: str) -> bool:
        _ensure_well_formed(hashed)
        try:
            # digest comparison is hmac.compare_digest inside werkzeug
            return bool(check_password_hash(hashed, password))
        except ValueError as exc:
            raise CorruptPasswordHashError() from exc


def _ensure_well_formed(hashed: str) -> None:
    parts = hashed.split("$", 2) if isinstance(hashed, str) else []
    if len(parts) != 3 or not all(parts):
        raise CorruptPasswordHashError()
    method = parts[0].split(":", 1)[0]
    if method not in _KNOWN_METHODS:
        raise CorruptPasswordHashError()
