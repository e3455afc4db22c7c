"""
Expansion d'un bloc feed.

Le bloc feed est remplacé, à sa position, par un container par item du flux.
Chaque container reçoit les blocs de la politique d'enfants (`blocks`) dans
l'ordre déclaré ; les champs calculés depuis l'item écrasent toujours les
overrides du feed. Aucune trace du feed ne subsiste dans l'arbre final.
"""
import logging
from typing import TYPE_CHECKING, Any, Callable, Optional
from urllib.parse import urlparse

from ..blocks.base import BlockType
from ..blocks.container import CONTAINER
from ..blocks.feed import FeedProperties
from ..core.errors import (
    BlockPath,
    FeedFetchFailed,
    InvalidBlockProperties,
    InvalidChildPolicy,
    MissingRequiredProperty,
)
from ..core.resolver import resolve
from ..core.schemas import Block
from .source import FeedItem

if TYPE_CHECKING:
    from ..factory import BuildContext
    from ..manifest.schema import ManifestBlock

log = logging.getLogger(__name__)


# ── Champs calculés par type synthétisable (None → type sauté pour l'item) ──

def _heading(item: FeedItem) -> Optional[dict]:
    return {"content": item.title}


def _html(item: FeedItem) -> Optional[dict]:
    return {"content": item.body}


def _image(item: FeedItem) -> Optional[dict]:
    if not item.image_source:
        return None
    return {"src": item.image_source, "link": item.link}


def _button(item: FeedItem) -> Optional[dict]:
    if not item.link:
        return None
    return {"href": item.link}


SYNTHESIZERS: dict[str, Callable[[FeedItem], Optional[dict]]] = {
    "heading": _heading,
    "html": _html,
    "image": _image,
    "button": _button,
}


# ── Validation ──────────────────────────────────────────────────────────────

def _check_source(source: Any, path: BlockPath) -> str:
    if source in (None, ""):
        raise MissingRequiredProperty("source", path)
    if not isinstance(source, str):
        raise InvalidBlockProperties("feed", path, f"source doit être une URI, reçu {type(source).__name__}")
    parsed = urlparse(source)
    if not parsed.scheme or (parsed.scheme != "file" and not parsed.netloc):
        raise InvalidBlockProperties("feed", path, f"source n'est pas une URI absolue : {source!r}")
    return source


def child_policy(blocks: Any, context: "BuildContext", path: BlockPath) -> tuple[str, ...]:
    """Valide la politique d'enfants : tags connus, synthétisables, sans doublon."""
    if not isinstance(blocks, (list, tuple)):
        raise InvalidChildPolicy(blocks, path, reason="liste de types attendue")
    seen: set = set()
    for tag in blocks:
        if not isinstance(tag, str) or tag not in SYNTHESIZERS or tag not in context.registry:
            raise InvalidChildPolicy(tag, path)
        if tag in seen:
            raise InvalidChildPolicy(tag, path, reason="type en double")
        seen.add(tag)
    return tuple(blocks)


# ── Expansion ───────────────────────────────────────────────────────────────

async def expand_feed(description: "ManifestBlock", context: "BuildContext", path: BlockPath) -> list[Block]:
    props = resolve(
        "feed",
        FEED.builtin_defaults(),
        description.declared_properties(),
        document_defaults=context.defaults_for("feed"),
    )
    source = _check_source(props.get("source"), path)
    policy = child_policy(props.get("blocks"), context, path)
    props = FEED.validate(props, path)

    log.info("Récupération du flux %s", source)
    try:
        fetched = await context.feed_source.fetch(source)
        items = [i if isinstance(i, FeedItem) else FeedItem.model_validate(i) for i in fetched]
    except Exception as e:
        log.warning("Flux %s en échec : %s", source, e)
        raise FeedFetchFailed(source, e, path) from e

    cap = context.settings.max_feed_items
    if cap is not None:
        items = items[:cap]
    if props.get("limit") is not None:
        items = items[:props["limit"]]
    log.info("Flux %s : %d items, politique %s", source, len(items), list(policy))

    container_type: BlockType = context.registry.get("container") or CONTAINER
    containers = []
    for index, item in enumerate(items):
        item_path = path + ((index, container_type.tag),)
        children = []
        for position, tag in enumerate(policy):
            computed = SYNTHESIZERS[tag](item)
            if computed is None:
                continue
            children.append(context.registry.get(tag).instantiate(
                props.get(tag),
                computed,
                document_defaults=context.defaults_for(tag),
                path=item_path + ((position, tag),),
            ))
        containers.append(container_type.instantiate(
            props.get("container"),
            document_defaults=context.defaults_for(container_type.tag),
            path=item_path,
            visibility=description.visibility,
            children=children,
        ))
    return containers


FEED = BlockType(
    "feed",
    FeedProperties,
    required=("source",),
    expander=expand_feed,
    description="Flux RSS/Atom développé en un container par item",
)
