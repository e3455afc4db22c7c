"""
EMAIL_BUILDER — FastAPI app
Démarrer : uvicorn email_builder.app:app --reload --port 8002
"""
import logging

from fastapi import FastAPI

from . import __version__
from .core.config import BuilderSettings
from .router import router

_settings = BuilderSettings.from_env()
logging.basicConfig(level=_settings.log_level, format="%(asctime)s %(levelname)s — %(message)s")
log = logging.getLogger(__name__)

app = FastAPI(title="EMAIL_BUILDER — Composition d'emails", version=__version__, docs_url="/docs")
app.include_router(router)


@app.get("/health")
def health() -> dict:
    return {"status": "ok", "version": __version__}
