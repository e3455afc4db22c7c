"""
Block Factory — description de bloc → nœuds de l'arbre.

Les frères sont construits dans un TaskGroup : seuls les fetch de flux
suspendent, donc plusieurs feeds d'un même document se récupèrent en
parallèle, et les résultats sont recollés dans l'ordre de déclaration.
Un échec annule les frères encore en vol.
"""
import asyncio
import logging
from typing import Any, Mapping, Optional, Sequence

from .blocks.registry import BlockRegistry
from .core.config import BuilderSettings
from .core.errors import (
    BlockBuildFailed,
    BlockPath,
    BuildError,
    DocumentBuildError,
    UnexpectedChildren,
    UnknownBlockType,
)
from .core.schemas import Block
from .feeds.source import FeedSource
from .manifest.schema import ManifestBlock

log = logging.getLogger(__name__)


class BuildContext:
    """État en lecture seule partagé par toute la construction d'un document."""

    def __init__(
        self,
        registry: BlockRegistry,
        feed_source: FeedSource,
        settings: Optional[BuilderSettings] = None,
        document_defaults: Optional[Mapping[str, Mapping[str, Any]]] = None,
    ):
        self.registry = registry
        self.feed_source = feed_source
        self.settings = settings or BuilderSettings()
        self.document_defaults = dict(document_defaults or {})

    def defaults_for(self, tag: str) -> Mapping[str, Any]:
        return self.document_defaults.get(tag) or {}


def _collapse(group: BaseExceptionGroup) -> BaseException:
    """Groupe d'erreurs de frères → une seule erreur (ou le groupe s'il contient autre chose)."""
    errors: list[BuildError] = []
    for exc in group.exceptions:
        if isinstance(exc, DocumentBuildError):
            errors.extend(exc.errors)
        elif isinstance(exc, BuildError):
            errors.append(exc)
        else:
            return group
    return errors[0] if len(errors) == 1 else DocumentBuildError(errors)


class BlockFactory:

    def __init__(self, context: BuildContext):
        self.context = context

    async def build(self, description: ManifestBlock, path: BlockPath = ()) -> list[Block]:
        """
        Construit un bloc. Retourne une liste : un seul nœud en général,
        zéro ou plusieurs pour un type doté d'un expanseur (feed).
        """
        block_type = self.context.registry.get(description.type)
        if block_type is None:
            raise UnknownBlockType(description.type, path)

        if description.children and not block_type.composite:
            raise UnexpectedChildren(block_type.tag, path)

        if block_type.expander is not None:
            return await block_type.expander(description, self.context, path)

        children: list[Block] = []
        if description.children:
            children = await self.build_sequence(description.children, path)

        log.debug("Bloc %s construit (%d enfants)", block_type.tag, len(children))
        return [block_type.instantiate(
            description.declared_properties(),
            document_defaults=self.context.defaults_for(block_type.tag),
            path=path,
            visibility=description.visibility,
            children=children,
        )]

    async def _build_child(self, description: ManifestBlock, path: BlockPath) -> list[Block]:
        """Toute exception étrangère devient une BuildError localisée."""
        try:
            return await self.build(description, path)
        except BuildError:
            raise
        except Exception as e:
            log.warning("Bloc %s en échec : %s", description.type, e)
            raise BlockBuildFailed(description.type, e, path) from e

    async def build_sequence(self, descriptions: Sequence[ManifestBlock], parent_path: BlockPath = ()) -> list[Block]:
        """Construit des frères et concatène leurs nœuds dans l'ordre déclaré."""
        if not descriptions:
            return []
        try:
            async with asyncio.TaskGroup() as group:
                tasks = [
                    group.create_task(self._build_child(d, parent_path + ((i, d.type),)))
                    for i, d in enumerate(descriptions)
                ]
        except BaseExceptionGroup as group_error:
            collapsed = _collapse(group_error)
            if collapsed is group_error:
                raise
            raise collapsed from None

        blocks: list[Block] = []
        for task in tasks:
            blocks.extend(task.result())
        return blocks
