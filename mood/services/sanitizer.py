# mood/services/sanitizer.py
"""
Redaction of identifying details from free-text mood notes.
"""

import hashlib
import re

NUMBER_PATTERN = re.compile(r"\b\d{10,}\b", re.ASCII)
EMAIL_PATTERN = re.compile(
    r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b", re.ASCII
)
# Two or more consecutive capitalized words, e.g. "John Smith"
NAME_PATTERN = re.compile(r"\b[A-Z][a-z]+(?: [A-Z][a-z]+)+\b", re.ASCII)

DEFAULT_MAX_LENGTH = 500


def sanitize_note(note: str, max_length: int = DEFAULT_MAX_LENGTH) -> str:
    """
    Replace long digit runs, email addresses and name-like word pairs with
    placeholder tokens, then trim and truncate to ``max_length``.
    """
    redacted = NUMBER_PATTERN.sub("[number]", note)
    redacted = EMAIL_PATTERN.sub("[email]", redacted)
    redacted = NAME_PATTERN.sub("[name]", redacted)
    return redacted.strip()[:max_length]


def hash_note(note: str) -> str:
    """sha256 hex digest of the trimmed, lower-cased raw note"""
    return hashlib.sha256(note.strip().lower().encode("utf-8")).hexdigest()
