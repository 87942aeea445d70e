# novadesk/errors.py
import logging

from fastapi import Request
from fastapi.responses import JSONResponse

log = logging.getLogger(__name__)


class ContactError(Exception):
    """
    Terminal failure of a /contact request.

    `code` is the stable string returned to the client as {"ok": false, "error": code};
    the exception message stays server-side.
    """
    code = "send-failed"
    status_code = 500


# ---- client input (400) ------------------------------------------------------


class InvalidInput(ContactError):
    code = "invalid-input"
    status_code = 400


class InvalidPhone(ContactError):
    code = "invalid-phone"
    status_code = 400


# ---- operator configuration (500) -------------------------------------------


class ServerNotConfigured(ContactError):
    code = "server-not-configured"


# ---- mail transport (500) ----------------------------------------------------


class SmtpVerifyFailed(ContactError):
    code = "smtp-verify-failed"


class SendFailed(ContactError):
    code = "send-failed"


async def contact_error_handler(request: Request, exc: ContactError) -> JSONResponse:
    if exc.status_code < 500:
        log.info("[contact] rejected %s: %s", exc.code, exc)
    return JSONResponse({"ok": False, "error": exc.code}, status_code=exc.status_code)
