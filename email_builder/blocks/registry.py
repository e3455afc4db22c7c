"""
Registry des types de blocs — ouvert : un nouveau type s'ajoute par
`register()` sans toucher aux types existants.
"""
import logging
from typing import Iterator, Optional

from .base import BlockType
from .button import BUTTON
from .container import CONTAINER
from .divider import DIVIDER
from .heading import HEADING
from .html import HTML
from .image import IMAGE
from .spacer import SPACER

log = logging.getLogger(__name__)

BUILTIN_TYPES = (HEADING, HTML, IMAGE, BUTTON, SPACER, DIVIDER, CONTAINER)


class BlockRegistry:
    """Mapping tag → BlockType."""

    def __init__(self, types: tuple[BlockType, ...] = ()):
        self._types: dict[str, BlockType] = {}
        for block_type in types:
            self.register(block_type)

    def register(self, block_type: BlockType, *, replace: bool = False) -> BlockType:
        if block_type.tag in self._types and not replace:
            raise ValueError(f"Type de bloc déjà enregistré : {block_type.tag!r}")
        self._types[block_type.tag] = block_type
        log.debug("Type de bloc enregistré : %s", block_type.tag)
        return block_type

    def get(self, tag: str) -> Optional[BlockType]:
        return self._types.get(tag)

    def __contains__(self, tag: object) -> bool:
        return tag in self._types

    def __iter__(self) -> Iterator[BlockType]:
        return iter(self._types.values())

    @property
    def tags(self) -> list[str]:
        return list(self._types)

    def catalog(self) -> list[dict]:
        """Catalogue des types : tag, description, défauts et JSON schema."""
        entries = []
        for block_type in self:
            model = block_type.properties_model
            entries.append({
                "type": block_type.tag,
                "description": block_type.description,
                "composite": block_type.composite,
                "required": list(block_type.required),
                "defaults": block_type.builtin_defaults(),
                "schema": model.model_json_schema() if model is not None else None,
            })
        return entries


def default_registry() -> BlockRegistry:
    """Registry neuf contenant tous les types intégrés, `feed` compris."""
    from ..feeds.expander import FEED

    return BlockRegistry(BUILTIN_TYPES + (FEED,))
