"""
Zenith Builder — application FastAPI de l'éditeur
Démarrer : uvicorn zenith_builder.app:app --reload --port 8001  →  http://localhost:8001/editor/
"""
import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse

from . import config
from .generator.ai import ContentGenerator
from .router import router
from .session import EditorSession

log = logging.getLogger(__name__)


def create_app(generator: Optional[ContentGenerator] = None) -> FastAPI:
    """Une session d'édition en mémoire par application (perdue à l'arrêt)."""
    logging.basicConfig(level=config.LOG_LEVEL, format="%(asctime)s %(levelname)s — %(message)s")

    app = FastAPI(title="Zenith Builder", version="1.0.0", docs_url="/docs")
    app.add_middleware(CORSMiddleware, allow_origins=["*"], allow_methods=["*"], allow_headers=["*"])
    app.state.editor_session = EditorSession(generator)
    app.include_router(router)

    @app.get("/", include_in_schema=False)
    def root():
        return RedirectResponse(url="/editor/")

    log.info("Session d'édition créée")
    return app


app = create_app()
