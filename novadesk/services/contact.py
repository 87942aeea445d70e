# novadesk/services/contact.py
import logging
from typing import Any, Mapping

from pydantic import ValidationError
from starlette.concurrency import run_in_threadpool

from novadesk.config import Settings
from novadesk.errors import InvalidInput, InvalidPhone, ServerNotConfigured
from novadesk.models import Inquiry, MailMessage
from novadesk.schemas import ContactIn
from novadesk.services.email import TransportFactory, dispatch_inquiry, transport_for
from novadesk.utils.email_address import is_valid_email
from novadesk.utils.phone import to_e164_us

log = logging.getLogger(__name__)


def validate_inquiry(raw: Mapping[str, Any]) -> Inquiry:
    """
    Turn raw form fields into an Inquiry.

    Order matters: name/email shape first (InvalidInput), then phone (InvalidPhone).
    """
    try:
        payload = ContactIn(**dict(raw or {}))
    except ValidationError as e:
        raise InvalidInput(f"unreadable contact payload: {e.error_count()} error(s)") from e

    name = payload.name.strip()
    email = payload.email.strip()
    if not name or not is_valid_email(email):
        raise InvalidInput("name missing or email malformed")

    e164 = to_e164_us(payload.phone)
    if not e164:
        raise InvalidPhone("phone is not 10 US digits")

    return Inquiry(name=name, email=email, phone=e164, message=payload.message or None)


def ensure_mail_configured(settings: Settings) -> None:
    missing = settings.missing_mail_settings
    if missing:
        log.warning("Contact mail not configured; missing %s", ", ".join(missing))
        raise ServerNotConfigured(f"missing {', '.join(missing)}")


async def submit_contact(
    raw: Mapping[str, Any],
    settings: Settings,
    transport_factory: TransportFactory = transport_for,
) -> MailMessage:
    """
    Validate, check configuration, then verify + send on the threadpool.

    Client input problems are always reported before server misconfiguration.
    """
    inq = validate_inquiry(raw)
    ensure_mail_configured(settings)
    return await run_in_threadpool(dispatch_inquiry, inq, settings, transport_factory)
