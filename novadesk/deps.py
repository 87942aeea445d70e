# novadesk/deps.py
from fastapi import Request

from novadesk.config import Settings
from novadesk.services.email import TransportFactory, transport_for


def get_settings(request: Request) -> Settings:
    # populated once by create_app(); read-only afterwards
    return request.app.state.settings


def get_transport_factory() -> TransportFactory:
    return transport_for
