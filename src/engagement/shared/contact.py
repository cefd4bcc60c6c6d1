"""Validation helpers for contact details captured on engagement forms."""

import re

from protean.exceptions import ValidationError

_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def check_email(value: str | None, field: str = "email", required: bool = True) -> None:
    if not value:
        if required:
            raise ValidationError({field: ["Email is required"]})
        return
    if not _EMAIL_RE.match(value):
        raise ValidationError({field: [f"Invalid email address: {value!r}"]})


def check_min_length(value: str | None, field: str, minimum: int = 2) -> None:
    if not value or len(value.strip()) < minimum:
        raise ValidationError({field: [f"Must have at least {minimum} characters"]})
