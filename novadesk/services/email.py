# novadesk/services/email.py
from __future__ import annotations

import logging
import smtplib
import ssl
from contextlib import contextmanager
from html import escape
from typing import Callable, Iterator

from novadesk.config import Settings, implicit_tls_for_port
from novadesk.errors import SendFailed, SmtpVerifyFailed
from novadesk.models import Inquiry, MailMessage

log = logging.getLogger(__name__)

INQUIRY_SUBJECT = "New NovaDesk Inquiry"
SMTP_TIMEOUT_SECONDS = 20


# ---- transport ---------------------------------------------------------------


class SmtpTransport:
    """
    One authenticated SMTP session per call.

    Port 465 connects with TLS from the first byte; other ports connect in
    plaintext and upgrade with STARTTLS when the server advertises it.
    Both verify() and send() raise smtplib.SMTPException / OSError on failure.
    """

    def __init__(self, host: str, port: int, user: str, password: str,
                 timeout: float = SMTP_TIMEOUT_SECONDS):
        self.host = host
        self.port = port
        self.user = user
        self.password = password
        self.timeout = timeout

    @property
    def secure(self) -> bool:
        return implicit_tls_for_port(self.port)

    @contextmanager
    def _session(self) -> Iterator[smtplib.SMTP]:
        context = ssl.create_default_context()
        if self.secure:
            conn: smtplib.SMTP = smtplib.SMTP_SSL(self.host, self.port, timeout=self.timeout, context=context)
        else:
            conn = smtplib.SMTP(self.host, self.port, timeout=self.timeout)
        with conn as s:
            s.ehlo()
            if not self.secure and s.has_extn("starttls"):
                s.starttls(context=context)
                s.ehlo()
            s.login(self.user, self.password)
            yield s

    def verify(self) -> None:
        with self._session() as s:
            s.noop()
        log.info("SMTP verify ok via %s:%s (secure=%s)", self.host, self.port, self.secure)

    def send(self, mail: MailMessage) -> None:
        with self._session() as s:
            s.send_message(mail.to_email_message())
        log.info("SMTP send ok → %s via %s:%s", mail.to, self.host, self.port)


TransportFactory = Callable[[Settings], SmtpTransport]


def transport_for(settings: Settings) -> SmtpTransport:
    return SmtpTransport(
        host=settings.SMTP_HOST,
        port=settings.SMTP_PORT,
        user=settings.SMTP_USER,
        password=settings.SMTP_PASS,
    )


# ---- inquiry email -----------------------------------------------------------


def _inquiry_text(inq: Inquiry) -> str:
    lines = [
        INQUIRY_SUBJECT,
        "",
        f"Name: {inq.name}",
        f"Email: {inq.email}",
        f"Phone: {inq.phone}",
    ]
    if inq.message:
        lines += ["Message:", inq.message]
    return "\n".join(lines) + "\n"


def _inquiry_html(inq: Inquiry) -> str:
    # every submitted value is escaped, including the already-validated ones
    message_html = (
        f"<p><strong>Message:</strong><br/>{escape(inq.message)}</p>"
        if inq.message
        else ""
    )
    return f"""
    <div style="font-family:system-ui,-apple-system,Segoe UI,Roboto,Helvetica,Arial,sans-serif">
      <h2 style="margin:0 0 8px 0">{INQUIRY_SUBJECT}</h2>
      <p><strong>Name:</strong> {escape(inq.name)}</p>
      <p><strong>Email:</strong> {escape(inq.email)}</p>
      <p><strong>Phone:</strong> {escape(inq.phone)}</p>
      {message_html}
      <hr/>
      <p style="color:#666;font-size:12px">Sent from novadesk-site</p>
    </div>
    """.strip()


def build_inquiry_email(inq: Inquiry, settings: Settings) -> MailMessage:
    """
    Office notification for a contact submission.

    Goes to CONTACT_TO from CONTACT_FROM; replies route back to the submitter.
    """
    return MailMessage(
        subject=INQUIRY_SUBJECT,
        text=_inquiry_text(inq),
        html=_inquiry_html(inq),
        sender=settings.CONTACT_FROM,
        to=settings.CONTACT_TO,
        reply_to=inq.email,
    )


def dispatch_inquiry(
    inq: Inquiry,
    settings: Settings,
    transport_factory: TransportFactory = transport_for,
) -> MailMessage:
    """
    Verify the SMTP session, then send exactly one inquiry email.

    Raises SmtpVerifyFailed (nothing sent) or SendFailed. The underlying
    cause is logged here and kept out of the client response.
    """
    transport = transport_factory(settings)

    try:
        transport.verify()
    except Exception as e:
        log.error("SMTP verify failed: %s", e)
        raise SmtpVerifyFailed(str(e)) from e

    mail = build_inquiry_email(inq, settings)

    try:
        transport.send(mail)
    except smtplib.SMTPException as e:
        log.error("SMTP send failed: %s", e)
        raise SendFailed(str(e)) from e
    except Exception as e:
        log.error("SMTP error: %s", e)
        raise SendFailed(str(e)) from e

    log.info("Inquiry email → %s reply_to=%s", mail.to, mail.reply_to)
    return mail
