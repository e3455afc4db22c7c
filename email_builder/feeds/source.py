"""
Interface des sources de flux + implémentation en mémoire.

Une source retourne les items dans l'ordre natif du flux ; le moteur ne
les réordonne ni ne les déduplique jamais.
"""
from typing import Any, Mapping, Optional, Protocol, Sequence, Union, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field


class FeedItem(BaseModel):
    """Une entrée de flux : lecture seule, consommée une fois par expansion."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    title: str = ""
    body: str = ""
    image_source: Optional[str] = Field(default=None, alias="imageSource")
    link: Optional[str] = None


@runtime_checkable
class FeedSource(Protocol):
    async def fetch(self, uri: str) -> Sequence[FeedItem]: ...


class UnknownFeed(LookupError):
    pass


class StaticFeedSource:
    """
    Source en mémoire : uri → items. Sert aux prévisualisations et aux tests.

    strict=False : une uri inconnue donne un flux vide au lieu d'une erreur.
    """

    def __init__(
        self,
        feeds: Optional[Mapping[str, Sequence[Union[FeedItem, Mapping[str, Any]]]]] = None,
        *,
        strict: bool = True,
    ):
        self.strict = strict
        self._feeds = {
            uri: tuple(i if isinstance(i, FeedItem) else FeedItem.model_validate(i) for i in items)
            for uri, items in (feeds or {}).items()
        }

    async def fetch(self, uri: str) -> Sequence[FeedItem]:
        if uri not in self._feeds:
            if self.strict:
                raise UnknownFeed(f"Flux inconnu : {uri}")
            return ()
        return self._feeds[uri]
