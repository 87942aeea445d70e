"""
Request-scoped data for the contact flow.

Nothing here is persisted: an Inquiry lives for one /contact request and the
MailMessage built from it is discarded once the transport has it.
"""

from dataclasses import dataclass
from email.message import EmailMessage
from typing import Optional


@dataclass(frozen=True)
class Inquiry:
    """
    A validated contact submission.

    Attributes:
        name: Submitter name, stripped and non-empty
        email: Submitter address, trimmed; passed the email shape check
        phone: Normalized E.164 US number (+1XXXXXXXXXX)
        message: Free text, None when the form left it empty
    """
    name: str
    email: str
    phone: str
    message: Optional[str] = None


@dataclass(frozen=True)
class MailMessage:
    subject: str
    text: str
    html: str
    sender: str
    to: str
    reply_to: Optional[str] = None

    def to_email_message(self) -> EmailMessage:
        msg = EmailMessage()
        msg["From"] = self.sender
        msg["To"] = self.to
        msg["Subject"] = self.subject
        if self.reply_to:
            msg["Reply-To"] = self.reply_to
        msg.set_content(self.text or "")
        if self.html:
            msg.add_alternative(self.html, subtype="html")
        return msg
