"""AdminUser aggregate: a staff member allowed to use the admin endpoints."""

import re
from datetime import UTC, datetime

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, String

from backoffice.admin.passwords import hash_password, needs_rehash, verify_password
from backoffice.domain import backoffice

_USERNAME_RE = re.compile(r"^[a-zA-Z0-9_.-]{3,50}$")
MIN_PASSWORD_LENGTH = 8


@backoffice.aggregate
class AdminUser:
    username: String(required=True, max_length=50)
    password_hash: String(required=True, max_length=255)
    created_at: DateTime()
    last_login_at: DateTime()

    @invariant.post
    def username_must_be_valid(self):
        if not _USERNAME_RE.match(self.username or ""):
            raise ValidationError(
                {"username": ["Username must be 3-50 letters, digits, dots, dashes or underscores"]}
            )

    @classmethod
    def register(cls, username: str, password: str, enforce_length: bool = True) -> "AdminUser":
        if enforce_length and len(password or "") < MIN_PASSWORD_LENGTH:
            raise ValidationError({"password": [f"Password must have at least {MIN_PASSWORD_LENGTH} characters"]})
        return cls(
            username=username,
            password_hash=hash_password(password),
            created_at=datetime.now(UTC),
        )

    def check_password(self, password: str) -> bool:
        return verify_password(password, self.password_hash)

    def record_login(self, password: str) -> None:
        """Stamp a successful login, upgrading a legacy hash if needed."""
        if needs_rehash(self.password_hash):
            self.password_hash = hash_password(password)
        self.last_login_at = datetime.now(UTC)
