"""
API publique du moteur de composition d'emails.
"""
import asyncio
import logging
from typing import Optional, Sequence, Union

from .blocks.registry import BlockRegistry, default_registry
from .core.config import BuilderSettings
from .core.errors import BuildError, DocumentBuildTimeout, InvalidManifest
from .core.schemas import DocumentTree, RenderContext
from .factory import BlockFactory, BuildContext
from .feeds.rss import HttpFeedSource
from .feeds.source import FeedSource, StaticFeedSource
from .manifest.parser import ManifestSource, load_manifest
from .manifest.schema import ManifestDocument
from .renderer.base import Renderer
from .visibility import filter_tree

log = logging.getLogger(__name__)


class EmailBuilder:
    """
    Builder d'emails EURKAI.

    Usage:
        >>> builder = EmailBuilder()
        >>> tree = await builder.build(manifest, RenderContext(device="mobile"))
        >>> html = await builder.render(manifest, my_renderer, RenderContext(device="mobile"))
    """

    def __init__(
        self,
        registry: Optional[BlockRegistry] = None,
        feed_source: Optional[FeedSource] = None,
        settings: Optional[BuilderSettings] = None,
    ):
        """
        Args:
            registry: Types de blocs connus (défaut : types intégrés)
            feed_source: Source des flux (défaut : HTTP RSS/Atom)
            settings: Configuration (défaut : variables d'environnement)
        """
        self.settings = settings or BuilderSettings.from_env()
        self.registry = registry or default_registry()
        self.feed_source = feed_source or HttpFeedSource(self.settings)

    async def build(self, document: ManifestSource, context: Optional[RenderContext] = None) -> DocumentTree:
        """
        Construit l'arbre d'un document puis applique le filtre de visibilité.

        Sans contexte, l'arbre complet est retourné (non filtré) : il peut
        alors être filtré plusieurs fois, une par destinataire.

        Raises:
            InvalidManifest: document illisible ou non conforme au schéma
            BuildError: premier échec rencontré ; aucun arbre partiel n'est retourné
        """
        try:
            manifest = load_manifest(document)
        except (ValueError, OSError) as e:
            raise InvalidManifest(e) from e
        tree = await self._build_tree(manifest)
        if context is None:
            return tree
        return filter_tree(tree, context)

    async def _build_tree(self, manifest: ManifestDocument) -> DocumentTree:
        factory = BlockFactory(BuildContext(
            self.registry,
            self.feed_source,
            self.settings,
            document_defaults=manifest.defaults,
        ))
        timeout = self.settings.build_timeout
        if timeout is None:
            blocks = await factory.build_sequence(manifest.content.blocks)
        else:
            try:
                async with asyncio.timeout(timeout):
                    blocks = await factory.build_sequence(manifest.content.blocks)
            except TimeoutError as e:
                log.warning("Document %r : timeout après %ss", manifest.subject, timeout)
                raise DocumentBuildTimeout(timeout) from e

        log.info("Document %r construit : %d blocs racine", manifest.subject, len(blocks))
        return DocumentTree(
            from_=manifest.from_,
            subject=manifest.subject,
            preview_text=manifest.preview_text,
            blocks=blocks,
        )

    async def build_many(
        self,
        documents: Sequence[ManifestSource],
        context: Optional[RenderContext] = None,
    ) -> list[Union[DocumentTree, BuildError]]:
        """
        Construit plusieurs documents en parallèle. Chaque résultat est l'arbre
        ou l'erreur de son document : un document en échec n'arrête pas le lot.
        """
        results = await asyncio.gather(
            *(self.build(doc, context) for doc in documents),
            return_exceptions=True,
        )
        for result in results:
            if isinstance(result, BaseException) and not isinstance(result, BuildError):
                raise result
        return list(results)

    async def validate(self, document: ManifestSource) -> DocumentTree:
        """Construit sans réseau : chaque feed est développé sur un flux vide."""
        offline = EmailBuilder(self.registry, StaticFeedSource(strict=False), self.settings)
        return await offline.build(document)

    async def render(self, document: ManifestSource, renderer: Renderer, context: Optional[RenderContext] = None) -> str:
        """Construit, filtre puis délègue le rendu au renderer fourni."""
        context = context or RenderContext()
        tree = await self.build(document, context)
        return renderer.render_document(tree, context)


async def build_document(document: ManifestSource, context: Optional[RenderContext] = None, **kwargs) -> DocumentTree:
    """Fonction raccourcie : EmailBuilder(**kwargs).build(document, context)."""
    return await EmailBuilder(**kwargs).build(document, context)
