"""
Pytest configuration and fixtures for all tests.
"""

import smtplib

import pytest
from fastapi.testclient import TestClient

from novadesk.config import Settings
from novadesk.deps import get_transport_factory
from novadesk.main import create_app


class FakeTransport:
    """Stand-in for SmtpTransport that records calls instead of opening sockets."""

    def __init__(self, verify_error=None, send_error=None):
        self.verify_error = verify_error
        self.send_error = send_error
        self.verify_calls = 0
        self.sent = []

    def verify(self):
        self.verify_calls += 1
        if self.verify_error:
            raise self.verify_error

    def send(self, mail):
        if self.send_error:
            raise self.send_error
        self.sent.append(mail)


@pytest.fixture
def site_dir(tmp_path):
    (tmp_path / "index.html").write_text("<h1>NovaDesk</h1>", encoding="utf-8")
    (tmp_path / "styles.css").write_text("body { color: #111; }", encoding="utf-8")
    (tmp_path / ".env").write_text("SMTP_PASS=hunter2\n", encoding="utf-8")
    return tmp_path


@pytest.fixture
def settings(site_dir):
    return Settings(
        ENV="test",
        PORT=5500,
        STATIC_DIR=str(site_dir),
        LOG_DIR=str(site_dir / "logs"),
        CONTACT_TO="sales@novadeskapp.com",
        CONTACT_FROM="no-reply@novadeskapp.com",
        SMTP_HOST="smtp.example.com",
        SMTP_PORT=587,
        SMTP_USER="mailer",
        SMTP_PASS="s3cret-pass",
    )


@pytest.fixture
def transport():
    return FakeTransport()


@pytest.fixture
def make_client(transport):
    """Build a TestClient for any Settings, wired to the fake transport."""
    clients = []

    def _make(settings):
        app = create_app(settings)
        app.dependency_overrides[get_transport_factory] = lambda: (lambda _settings: transport)
        client = TestClient(app)
        client.__enter__()
        clients.append(client)
        return client

    yield _make
    for c in clients:
        c.__exit__(None, None, None)


@pytest.fixture
def client(make_client, settings):
    return make_client(settings)


@pytest.fixture
def smtp_auth_error():
    return smtplib.SMTPAuthenticationError(535, b"5.7.8 Username and Password not accepted")
