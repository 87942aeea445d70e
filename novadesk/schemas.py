from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator


class ContactIn(BaseModel):
    # tolerate extra form fields (honeypots, tracking params, ...)
    model_config = ConfigDict(extra="ignore")

    name: str = ""
    email: str = ""
    phone: str = ""
    message: str = ""

    @field_validator("name", "email", "phone", "message", mode="before")
    @classmethod
    def _coerce_text(cls, v: Any) -> str:
        if isinstance(v, (dict, list)):
            raise ValueError("expected a text value")
        # falsy JSON scalars (null, false, 0) count as missing
        if not v:
            return ""
        if isinstance(v, bool):
            return "true"
        return str(v)


class OkOut(BaseModel):
    ok: bool = True


class SmtpDebugOut(BaseModel):
    ok: bool = True
    configured: bool
    host: str
    port: int
    secure: bool
    haveUser: bool
    havePass: bool
    toSet: bool
    fromSet: bool
