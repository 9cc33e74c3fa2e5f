# email classification is pure, validate_email adds the printed verdict

from __future__ import annotations
from typing import Optional
from .models import EmailVerdict


def classify_email(email: Optional[str]) -> EmailVerdict:
    if not email:
        # covers both None and ""
        return EmailVerdict.INVALID_EMPTY
    if "@" in email:
        return EmailVerdict.VALID
    return EmailVerdict.INVALID_NO_AT_SIGN


def validate_email(email: Optional[str]) -> EmailVerdict:
    verdict = classify_email(email)
    print(verdict.message)
    return verdict
