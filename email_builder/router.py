"""
Router FastAPI — endpoints email_builder.

POST /email-builder/build     → {document, context?} → DocumentTree JSON
POST /email-builder/validate  → ManifestDocument → {"valid": bool, "error"?}
GET  /email-builder/catalog   → types de blocs + défauts + JSON schemas
"""
import logging
from functools import lru_cache
from typing import Optional

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from .builder import EmailBuilder
from .core.errors import BuildError, FeedFetchFailed
from .core.schemas import RenderContext
from .manifest.schema import ManifestDocument

log = logging.getLogger(__name__)

router = APIRouter(prefix="/email-builder", tags=["email_builder"])


class BuildRequest(BaseModel):
    document: ManifestDocument
    context: Optional[RenderContext] = None


@lru_cache(maxsize=1)
def get_builder() -> EmailBuilder:
    return EmailBuilder()


@router.post("/build", summary="Construit l'arbre d'un email")
async def build(req: BuildRequest, builder: EmailBuilder = Depends(get_builder)) -> JSONResponse:
    """Reçoit un manifest (+ contexte de rendu optionnel), retourne l'arbre résolu."""
    try:
        tree = await builder.build(req.document, req.context)
    except FeedFetchFailed as e:
        return JSONResponse(e.to_dict(), status_code=502)
    except BuildError as e:
        log.info("Build refusé : %s", e)
        return JSONResponse(e.to_dict(), status_code=422)
    return JSONResponse(tree.model_dump(mode="json", by_alias=True))


@router.post("/validate", summary="Valide un manifest sans récupérer les flux")
async def validate(manifest: ManifestDocument, builder: EmailBuilder = Depends(get_builder)) -> dict:
    try:
        await builder.validate(manifest)
        return {"valid": True}
    except BuildError as e:
        return {"valid": False, "error": str(e), "kind": e.kind}


@router.get("/catalog", summary="Liste les types de blocs disponibles")
def catalog(builder: EmailBuilder = Depends(get_builder)) -> JSONResponse:
    return JSONResponse({"blocks": builder.registry.catalog()})
