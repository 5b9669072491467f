"""
Input normalization for form fields.

Request bodies come from hand-filled forms, so values are trimmed before they are
validated or stored. Phone numbers are otherwise kept as entered: the same number
written two different ways counts as two registrations.
"""
from typing import Optional


def clean_str(value: Optional[str]) -> Optional[str]:
    """
    Strip surrounding whitespace. Returns None for missing or blank values.
    """
    if value is None:
        return None
    s = str(value).strip()
    return s or None
