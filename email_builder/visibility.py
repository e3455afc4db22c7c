"""
Filtre de visibilité — élague l'arbre pour un contexte de rendu.

Descente top-down : un parent masqué retire tout son sous-arbre sans
évaluer les prédicats des enfants. L'arbre d'entrée n'est jamais modifié.
"""
from typing import Sequence

from .core.schemas import Block, DocumentTree, RenderContext


def filter_blocks(blocks: Sequence[Block], context: RenderContext) -> list[Block]:
    kept = []
    for block in blocks:
        if not block.is_visible(context):
            continue
        if block.children:
            block = block.model_copy(update={"children": filter_blocks(block.children, context)})
        kept.append(block)
    return kept


def filter_tree(tree: DocumentTree, context: RenderContext) -> DocumentTree:
    """Retourne un nouvel arbre ne contenant que les blocs visibles dans `context`."""
    return tree.model_copy(update={"blocks": filter_blocks(tree.blocks, context)})
