from __future__ import annotations

from functools import lru_cache

from email_validator import EmailNotValidError, validate_email


@lru_cache(maxsize=256)
def _validate_format_only(candidate: str) -> str:
    """Normalize addresses validating only syntax/IDNA information."""
    info = validate_email(candidate, check_deliverability=False)
    return info.normalized or info.email


def normalize_email(value: str) -> str:
    """Return the lower-cased normalized form of a syntactically valid address."""
    candidate = (value or "").strip()
    if not candidate:
        raise ValueError("The email field is required.")

    try:
        return _validate_format_only(candidate.lower())
    except EmailNotValidError as exc:
        raise ValueError("The email field must be a valid email address.") from exc
