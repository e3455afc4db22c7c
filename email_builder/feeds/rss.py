"""
Source HTTP — RSS/Atom via requests + feedparser.

requests est bloquant : l'appel tourne dans un thread (asyncio.to_thread)
pour ne pas geler la boucle et les autres documents en cours.
"""
import asyncio
import logging
import re
from pathlib import Path
from typing import Any, Optional, Union
from urllib.parse import unquote, urlparse

import feedparser
import requests

from ..core.config import BuilderSettings
from .source import FeedItem

log = logging.getLogger(__name__)

_IMG_SRC = re.compile(r"""<img\b[^>]*?\bsrc\s*=\s*["']([^"']+)["']""", re.IGNORECASE)


class FeedParseError(ValueError):
    pass


# ── Parsing ─────────────────────────────────────────────────────────────────

def _is_image(entry: dict) -> bool:
    medium = entry.get("medium") or ""
    mime = entry.get("type") or ""
    return medium == "image" or mime.startswith("image/")


def _entry_body(entry: Any) -> str:
    for content in entry.get("content") or []:
        if content.get("value"):
            return content["value"]
    return entry.get("summary", "") or ""


def _entry_image(entry: Any, body: str) -> Optional[str]:
    """media:content image → media:thumbnail → enclosure image → 1re <img> du corps."""
    for media in entry.get("media_content") or []:
        if media.get("url") and (_is_image(media) or not (media.get("medium") or media.get("type"))):
            return media["url"]
    for thumb in entry.get("media_thumbnail") or []:
        if thumb.get("url"):
            return thumb["url"]
    for enclosure in entry.get("enclosures") or []:
        if enclosure.get("href") and _is_image(enclosure):
            return enclosure["href"]
    match = _IMG_SRC.search(body)
    return match.group(1) if match else None


def parse_feed(content: Union[bytes, str]) -> list[FeedItem]:
    """Bytes RSS/Atom → items dans l'ordre du flux."""
    feed = feedparser.parse(content)
    if feed.bozo and not feed.entries:
        raise FeedParseError(f"Flux illisible : {feed.get('bozo_exception', 'format inconnu')}")
    items = []
    for entry in feed.entries:
        body = _entry_body(entry)
        items.append(FeedItem(
            title=entry.get("title", "") or "",
            body=body,
            image_source=_entry_image(entry, body),
            link=entry.get("link") or None,
        ))
    return items


# ── Source ──────────────────────────────────────────────────────────────────

class HttpFeedSource:
    """
    FeedSource réseau. Pas de retry : la politique appartient à l'appelant.

    Un requests.get par fetch, sans Session partagée : les fetch tournent
    dans des threads concurrents.
    """

    def __init__(self, settings: Optional[BuilderSettings] = None):
        self.settings = settings or BuilderSettings()

    async def fetch(self, uri: str) -> list[FeedItem]:
        return await asyncio.to_thread(self._fetch_sync, uri)

    def _fetch_sync(self, uri: str) -> list[FeedItem]:
        parsed = urlparse(uri)
        if parsed.scheme == "file":
            return parse_feed(Path(unquote(parsed.path)).read_bytes())

        resp = requests.get(
            uri,
            timeout=self.settings.feed_timeout,
            headers={"User-Agent": self.settings.user_agent},
        )
        resp.raise_for_status()
        items = parse_feed(resp.content)
        log.debug("%s : %d octets, %d items", uri, len(resp.content), len(items))
        return items
