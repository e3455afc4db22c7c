"""
Chargement d'un manifest — dict, texte JSON ou fichier .json.
"""
import json
import logging
from pathlib import Path
from typing import Any, Union

from .schema import ManifestDocument

log = logging.getLogger(__name__)

ManifestSource = Union[ManifestDocument, dict, str, Path]


def load_manifest(source: ManifestSource) -> ManifestDocument:
    """
    Retourne un ManifestDocument validé.

    Une chaîne commençant par "{" est lue comme du JSON, toute autre chaîne
    comme un chemin de fichier. Lève pydantic.ValidationError si le document
    est mal formé.
    """
    if isinstance(source, ManifestDocument):
        return source
    if isinstance(source, dict):
        return ManifestDocument.model_validate(source)
    if isinstance(source, str) and source.lstrip().startswith("{"):
        return ManifestDocument.model_validate_json(source)

    path = Path(source)
    log.debug("Lecture du manifest %s", path)
    with open(path, encoding="utf-8") as f:
        data: Any = json.load(f)
    return ManifestDocument.model_validate(data)
