# novadesk/utils/phone.py
import re
from typing import Any, Optional

_NON_DIGITS = re.compile(r"[^0-9]")


def digits_only(raw: Any) -> str:
    """Strip everything that is not an ASCII digit. None/empty -> ''."""
    if raw is None:
        return ""
    return _NON_DIGITS.sub("", str(raw))


def to_e164_us(raw: Any) -> Optional[str]:
    """
    Normalize a US number to E.164 (+1XXXXXXXXXX).

    Only exactly ten digits are accepted, whatever punctuation surrounds them:
      '(555) 123-4567' -> '+15551234567'
      '555-123'        -> None
    A leading country code ('1 555 123 4567') is eleven digits and is rejected.
    """
    d = digits_only(raw)
    if len(d) != 10:
        return None
    return f"+1{d}"
