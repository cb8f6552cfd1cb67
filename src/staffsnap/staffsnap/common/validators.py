from __future__ import annotations

from ..core.exceptions import ValidationError


def require_all(message: str, *values: str) -> None:
    """Raise a single message when any of the given form values is blank."""
    if any(not v or not v.strip() for v in values):
        raise ValidationError(message)
