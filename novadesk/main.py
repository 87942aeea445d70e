# novadesk/main.py
# Tiny static server + email endpoint for the "Talk to sales" form.
import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from novadesk.config import Settings, load_settings
from novadesk.errors import ContactError, contact_error_handler
from novadesk.logging_config import setup_logging

# Routers
from novadesk.routers.health import router as health_router
from novadesk.routers.smtp_debug import router as smtp_debug_router
from novadesk.routers.contact import router as contact_router
from novadesk.routers.site import router as site_router, static_files

log = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, configure_logging: bool = False) -> FastAPI:
    settings = settings or load_settings()

    @asynccontextmanager
    async def lifespan(_app: FastAPI):
        if configure_logging:
            setup_logging(settings.LOG_DIR)
        log.info("[novadesk-site] listening on http://localhost:%s (env=%s)", settings.PORT, settings.ENV)
        if not settings.mail_configured:
            log.warning("Contact mail disabled; missing %s", ", ".join(settings.missing_mail_settings))
        yield

    app = FastAPI(title="NovaDesk Site", version="0.1.0", lifespan=lifespan)
    app.state.settings = settings

    # ---------- CORS ----------
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.CORS_ORIGINS),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(ContactError, contact_error_handler)

    # ---------- Routers ----------
    app.include_router(health_router)
    app.include_router(smtp_debug_router)
    app.include_router(contact_router)
    app.include_router(site_router)

    # ---------- Static (must stay last: it swallows every other path) ----------
    app.mount("/", static_files(settings), name="static")

    return app


# served by `uvicorn novadesk.main:app` or run(); both configure logging on startup
app = create_app(configure_logging=True)


def run() -> None:
    settings = app.state.settings
    # lifespan applies the logging config
    uvicorn.run(app, host="0.0.0.0", port=settings.PORT, log_config=None)


if __name__ == "__main__":
    run()
