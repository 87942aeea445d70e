"""
Tests for /health, /smtp/debug, CORS and static file serving.
"""

import dataclasses

from fastapi.testclient import TestClient

from novadesk import main


def test_health(client):
    r = client.get("/health")

    assert r.status_code == 200
    assert r.json() == {"ok": True}


class TestSmtpDebug:

    def test_configured(self, client):
        r = client.get("/smtp/debug")

        assert r.status_code == 200
        assert r.json() == {
            "ok": True,
            "configured": True,
            "host": "smtp.example.com",
            "port": 587,
            "secure": False,
            "haveUser": True,
            "havePass": True,
            "toSet": True,
            "fromSet": True,
        }

    def test_never_reveals_credentials(self, client):
        r = client.get("/smtp/debug")

        assert "s3cret-pass" not in r.text
        assert "mailer" not in r.text

    def test_unconfigured_still_ok(self, make_client, settings):
        client = make_client(dataclasses.replace(settings, SMTP_HOST="", SMTP_PASS="", SMTP_PORT=465))

        r = client.get("/smtp/debug")

        assert r.status_code == 200
        body = r.json()
        assert body["ok"] is True
        assert body["configured"] is False
        assert body["host"] == "(empty)"
        assert body["secure"] is True
        assert body["havePass"] is False


class TestStaticSite:

    def test_root_serves_index(self, client):
        r = client.get("/")

        assert r.status_code == 200
        assert "<h1>NovaDesk</h1>" in r.text
        assert r.headers["content-type"].startswith("text/html")

    def test_serves_static_file(self, client):
        r = client.get("/styles.css")

        assert r.status_code == 200
        assert "color: #111" in r.text

    def test_unknown_file_is_404(self, client):
        assert client.get("/pricing.html").status_code == 404

    def test_dotfiles_are_hidden(self, client):
        r = client.get("/.env")

        assert r.status_code == 404
        assert "hunter2" not in r.text

    def test_subdirectory_index(self, client, site_dir):
        (site_dir / "pricing").mkdir()
        (site_dir / "pricing" / "index.html").write_text("<h1>Pricing</h1>", encoding="utf-8")

        r = client.get("/pricing/")

        assert r.status_code == 200
        assert "<h1>Pricing</h1>" in r.text

    def test_subdirectory_without_slash_redirects(self, client, site_dir):
        (site_dir / "pricing").mkdir()
        (site_dir / "pricing" / "index.html").write_text("<h1>Pricing</h1>", encoding="utf-8")

        r = client.get("/pricing", follow_redirects=False)
        assert r.status_code in (301, 307)
        assert r.headers["location"].endswith("/pricing/")

        assert "<h1>Pricing</h1>" in client.get("/pricing").text

    def test_dotfiles_hidden_in_subdirectories(self, client, site_dir):
        (site_dir / "docs").mkdir()
        (site_dir / "docs" / ".secret").write_text("token", encoding="utf-8")

        assert client.get("/docs/.secret").status_code == 404

    def test_missing_index_is_404(self, make_client, settings, tmp_path_factory):
        empty = tmp_path_factory.mktemp("empty-site")
        client = make_client(dataclasses.replace(settings, STATIC_DIR=str(empty)))

        assert client.get("/").status_code == 404


def test_cors_allows_any_origin_by_default(client):
    r = client.options(
        "/contact",
        headers={
            "Origin": "https://novadeskapp.com",
            "Access-Control-Request-Method": "POST",
            "Access-Control-Request-Headers": "content-type",
        },
    )

    assert r.status_code == 200
    assert r.headers["access-control-allow-origin"] == "*"


def test_startup_logs_listen_address(make_client, settings, caplog):
    with caplog.at_level("INFO", logger="novadesk"):
        make_client(settings)

    assert "[novadesk-site] listening on http://localhost:5500" in caplog.text


def test_lifespan_configures_logging_for_served_app(monkeypatch, settings):
    configured = []
    monkeypatch.setattr(main, "setup_logging", lambda log_dir: configured.append(log_dir))

    with TestClient(main.create_app(settings, configure_logging=True)) as client:
        assert client.get("/health").status_code == 200

    assert configured == [settings.LOG_DIR]


def test_module_app_configures_logging(monkeypatch):
    # `uvicorn novadesk.main:app` gets logging without going through run()
    configured = []
    monkeypatch.setattr(main, "setup_logging", lambda log_dir: configured.append(log_dir))

    with TestClient(main.app):
        pass

    assert configured == [main.app.state.settings.LOG_DIR]
