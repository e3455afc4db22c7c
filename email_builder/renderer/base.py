"""
Protocol Renderer — interface pluggable pour les renderers (HTML, MJML, texte…).
Le moteur ne fournit aucun renderer : il garantit seulement un arbre dont
toutes les propriétés sont résolues.
"""
from typing import Protocol, runtime_checkable

from ..core.schemas import Block, DocumentTree, RenderContext


@runtime_checkable
class Renderer(Protocol):
    def render_document(self, tree: DocumentTree, context: RenderContext) -> str: ...
    def render_block(self, block: Block, context: RenderContext) -> str: ...
