"""Core module pour email_builder."""
from .schemas import Block, DocumentTree, ReceiverCondition, RenderContext, Visibility
from .errors import (
    BlockBuildFailed,
    BlockPath,
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
    format_path,
)
from .config import BuilderSettings
from .resolver import resolve

__all__ = [
    "Block",
    "DocumentTree",
    "ReceiverCondition",
    "RenderContext",
    "Visibility",
    "BlockBuildFailed",
    "BlockPath",
    "BuildError",
    "DocumentBuildError",
    "DocumentBuildTimeout",
    "FeedFetchFailed",
    "InvalidBlockProperties",
    "InvalidChildPolicy",
    "InvalidManifest",
    "MissingRequiredProperty",
    "UnexpectedChildren",
    "UnknownBlockType",
    "format_path",
    "BuilderSettings",
    "resolve",
]
