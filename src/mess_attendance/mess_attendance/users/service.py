from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from werkzeug.security import check_password_hash, generate_password_hash

from ..common.validators import require_non_empty
from ..core.exceptions import AuthenticationError, InputMissingError


@dataclass(frozen=True)
class SessionOperator:
    """What we store into Flask session after login."""

    username: str


class OperatorAuthService:
    """Use case: authenticate the single configured operator account."""

    def __init__(self, username: Optional[str], password: Optional[str]):
        self._username = (username or "").strip() or None
        self._password_hash = generate_password_hash(password) if password else None

    @property
    def configured(self) -> bool:
        return self._username is not None and self._password_hash is not None

    def authenticate(self, username: Optional[str], password: Optional[str]) -> SessionOperator:
        try:
            username = require_non_empty(username, "Username")
        except InputMissingError:
            raise AuthenticationError("Username and password are required")

        if not password or not self.configured:
            raise AuthenticationError("Invalid credentials")
        if username != self._username or not check_password_hash(self._password_hash, password):
            raise AuthenticationError("Invalid credentials")

        return SessionOperator(username=username)
