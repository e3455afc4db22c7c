"""
Bloc Feed — configuration déclarative d'un flux RSS/Atom.
N'existe qu'au moment du build : l'expanseur le remplace par un container par item.
"""
from typing import Any, List, Optional

from pydantic import Field

from .base import BlockProperties

DEFAULT_CHILD_POLICY = ("heading", "html", "image")


class FeedProperties(BlockProperties):
    source: Optional[str] = None
    blocks: List[str] = Field(default_factory=lambda: list(DEFAULT_CHILD_POLICY))
    limit: Optional[int] = Field(default=None, ge=0)
    # Overrides par type synthétisé (clé = tag du type)
    heading: dict[str, Any] = Field(default_factory=dict)
    html: dict[str, Any] = Field(default_factory=dict)
    image: dict[str, Any] = Field(default_factory=dict)
    button: dict[str, Any] = Field(default_factory=dict)
    container: dict[str, Any] = Field(default_factory=dict)
