# novadesk/routers/contact.py
from fastapi import APIRouter, Depends, Request

from novadesk.config import Settings
from novadesk.deps import get_settings, get_transport_factory
from novadesk.schemas import OkOut
from novadesk.services.contact import submit_contact
from novadesk.services.email import TransportFactory

router = APIRouter(prefix="", tags=["contact"])


async def _read_body(request: Request) -> dict:
    """Support JSON + form; anything unreadable counts as an empty submission."""
    ct = (request.headers.get("content-type") or "").lower()
    raw = {}
    if ct.startswith("application/json"):
        try:
            raw = await request.json()
        except Exception:
            raw = {}
    elif ct.startswith("application/x-www-form-urlencoded") or ct.startswith("multipart/form-data"):
        try:
            form = await request.form()
            raw = dict(form)
        except Exception:
            raw = {}
    else:
        try:
            raw = await request.json()
        except Exception:
            raw = {}
    return raw if isinstance(raw, dict) else {}


@router.post("/contact", response_model=OkOut)
async def contact(
    request: Request,
    settings: Settings = Depends(get_settings),
    transport_factory: TransportFactory = Depends(get_transport_factory),
):
    raw = await _read_body(request)
    await submit_contact(raw, settings, transport_factory)
    return OkOut()
