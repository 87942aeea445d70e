# novadesk/config.py
import os
from dataclasses import dataclass, field
from typing import Mapping, Optional

from dotenv import find_dotenv, load_dotenv


# Port on which SMTP servers expect TLS from the first byte (SMTPS).
IMPLICIT_TLS_PORT = 465


def _as_int(env: Mapping[str, str], name: str, default: int) -> int:
    try:
        return int(str(env.get(name, default)).strip())
    except Exception:
        return default


def _as_list(raw: Optional[str], default: tuple[str, ...]) -> tuple[str, ...]:
    """
    Accepts:  'https://a.example, https://b.example'
    Returns:  ('https://a.example', 'https://b.example')
    """
    items = tuple(p.strip() for p in (raw or "").split(",") if p.strip())
    return items or default


def implicit_tls_for_port(port: int) -> bool:
    """
    Static TLS policy keyed only on the port number.

    465 means TLS-wrapped from connect (SMTP_SSL); every other port starts
    in plaintext and upgrades with STARTTLS when the server offers it.
    """
    return port == IMPLICIT_TLS_PORT


@dataclass(frozen=True)
class Settings:
    # App
    ENV: str = "dev"
    PORT: int = 5500
    STATIC_DIR: str = field(default_factory=os.getcwd)
    CORS_ORIGINS: tuple[str, ...] = ("*",)
    LOG_DIR: str = field(default_factory=lambda: os.path.join(os.getcwd(), "logs"))

    # Contact routing
    CONTACT_TO: str = "you@example.com"
    CONTACT_FROM: str = "no-reply@novadeskapp.com"

    # SMTP (Google Workspace, SendGrid SMTP, Mailgun SMTP, ...)
    SMTP_HOST: str = ""
    SMTP_PORT: int = 587
    SMTP_USER: str = ""
    SMTP_PASS: str = ""

    @property
    def smtp_secure(self) -> bool:
        return implicit_tls_for_port(self.SMTP_PORT)

    @property
    def missing_mail_settings(self) -> list[str]:
        required = {
            "SMTP_HOST": self.SMTP_HOST,
            "SMTP_USER": self.SMTP_USER,
            "SMTP_PASS": self.SMTP_PASS,
            "CONTACT_TO": self.CONTACT_TO,
            "CONTACT_FROM": self.CONTACT_FROM,
        }
        return [name for name, value in required.items() if not value]

    @property
    def mail_configured(self) -> bool:
        return not self.missing_mail_settings


def load_settings(env: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Build Settings once at process start.

    With no explicit mapping, `.env` is loaded into the process environment
    first (searched from the working directory up) and `os.environ` is read. Unset variables fall back to placeholder
    values that leave mail disabled but static content and /health working.
    """
    if env is None:
        # .env in the working directory (or a parent), not next to the installed package
        load_dotenv(find_dotenv(usecwd=True))
        env = os.environ

    return Settings(
        ENV=env.get("ENV", "dev"),
        PORT=_as_int(env, "PORT", 5500),
        STATIC_DIR=env.get("STATIC_DIR") or os.getcwd(),
        CORS_ORIGINS=_as_list(env.get("CORS_ORIGINS"), ("*",)),
        LOG_DIR=env.get("LOG_DIR") or os.path.join(os.getcwd(), "logs"),
        CONTACT_TO=env.get("CONTACT_TO") or "you@example.com",
        CONTACT_FROM=env.get("CONTACT_FROM") or "no-reply@novadeskapp.com",
        SMTP_HOST=(env.get("SMTP_HOST") or "").strip(),
        SMTP_PORT=_as_int(env, "SMTP_PORT", 587),
        SMTP_USER=(env.get("SMTP_USER") or "").strip(),
        SMTP_PASS=env.get("SMTP_PASS") or "",
    )
