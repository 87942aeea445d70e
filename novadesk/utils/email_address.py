# novadesk/utils/email_address.py
import re
from typing import Any

# user@host.tld screen only; no RFC 5322 parsing.
_EMAIL_SHAPE = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")


def is_valid_email(raw: Any) -> bool:
    if raw is None:
        return False
    return _EMAIL_SHAPE.fullmatch(str(raw).strip()) is not None
