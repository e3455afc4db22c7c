"""
EURKAI Email Builder v0.1 — composition d'emails responsives par blocs.

Usage :
    >>> from email_builder import EmailBuilder, RenderContext
    >>> tree = await EmailBuilder().build(manifest_dict, RenderContext(device="mobile"))

Blocs personnalisés :
    >>> from email_builder import BlockType, BlockProperties, default_registry
    >>> registry = default_registry()
    >>> registry.register(BlockType("quote", QuoteProperties))
"""
__version__ = "0.1.0"

from .core import (
    Block,
    DocumentTree,
    ReceiverCondition,
    RenderContext,
    Visibility,
    BlockBuildFailed,
    BuildError,
    DocumentBuildError,
    DocumentBuildTimeout,
    FeedFetchFailed,
    InvalidBlockProperties,
    InvalidChildPolicy,
    InvalidManifest,
    MissingRequiredProperty,
    UnexpectedChildren,
    UnknownBlockType,
    BuilderSettings,
    resolve,
)
from .blocks import BlockProperties, BlockRegistry, BlockType, default_registry
from .feeds import FeedItem, FeedSource, HttpFeedSource, StaticFeedSource
from .manifest import ManifestBlock, ManifestDocument, load_manifest
from .factory import BlockFactory, BuildContext
from .visibility import filter_blocks, filter_tree
from .renderer import Renderer
from .builder import EmailBuilder, build_document

__all__ = [
    # Arbre
    "Block", "DocumentTree", "ReceiverCondition", "RenderContext", "Visibility",
    # Erreurs
    "BlockBuildFailed", "BuildError", "DocumentBuildError", "DocumentBuildTimeout", "FeedFetchFailed",
    "InvalidBlockProperties", "InvalidChildPolicy", "InvalidManifest", "MissingRequiredProperty",
    "UnexpectedChildren", "UnknownBlockType",
    # Config / résolution
    "BuilderSettings", "resolve",
    # Blocs
    "BlockProperties", "BlockRegistry", "BlockType", "default_registry",
    # Flux
    "FeedItem", "FeedSource", "HttpFeedSource", "StaticFeedSource",
    # Manifest
    "ManifestBlock", "ManifestDocument", "load_manifest",
    # Construction
    "BlockFactory", "BuildContext", "EmailBuilder", "build_document",
    "filter_blocks", "filter_tree", "Renderer",
]
