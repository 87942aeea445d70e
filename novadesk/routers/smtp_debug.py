# novadesk/routers/smtp_debug.py
from fastapi import APIRouter, Depends

from novadesk.config import Settings
from novadesk.deps import get_settings
from novadesk.schemas import SmtpDebugOut

router = APIRouter(prefix="", tags=["smtp-debug"])

@router.get("/smtp/debug", response_model=SmtpDebugOut)
def smtp_debug(settings: Settings = Depends(get_settings)):
    # quick SMTP config peek: booleans only, never the credentials themselves
    return SmtpDebugOut(
        configured=settings.mail_configured,
        host=settings.SMTP_HOST or "(empty)",
        port=settings.SMTP_PORT,
        secure=settings.smtp_secure,
        haveUser=bool(settings.SMTP_USER),
        havePass=bool(settings.SMTP_PASS),
        toSet=bool(settings.CONTACT_TO),
        fromSet=bool(settings.CONTACT_FROM),
    )
