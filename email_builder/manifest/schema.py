"""
Schéma du manifest JSON — format d'entrée d'un email.
ManifestDocument → EmailBuilder.build() → DocumentTree → Renderer

Exemple minimal :
{
  "from": "news@example.com",
  "subject": "La lettre de la semaine",
  "defaults": {"heading": {"color": "#222222"}},
  "content": {
    "blocks": [
      {"type": "heading", "content": "Bonjour"},
      {"type": "feed", "source": "https://example.com/feed.xml",
       "blocks": ["heading", "html"], "heading": {"level": 2}},
      {"type": "html", "content": "<p>Réservé mobile</p>",
       "visibility": {"devices": ["mobile"]}}
    ]
  }
}
"""
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..core.schemas import Visibility


class ManifestBlock(BaseModel):
    """
    Description d'un bloc. `type` est obligatoire ; toute clé autre que
    `type`, `visibility` et `children` est une propriété déclarée.
    """
    model_config = ConfigDict(extra="allow")

    type: str
    visibility: Optional[Visibility] = None
    children: Optional[List["ManifestBlock"]] = None

    def declared_properties(self) -> dict[str, Any]:
        return dict(self.model_extra or {})


class ManifestContent(BaseModel):
    blocks: List[ManifestBlock] = Field(default_factory=list)


class ManifestDocument(BaseModel):
    """Document complet : enveloppe + défauts par type + blocs ordonnés."""
    model_config = ConfigDict(populate_by_name=True)

    from_: str = Field(alias="from")
    subject: str
    preview_text: Optional[str] = None
    defaults: Dict[str, Dict[str, Any]] = Field(
        default_factory=dict,
        description="Défauts niveau document par type de bloc (priorité sous les overrides)",
    )
    content: ManifestContent = Field(default_factory=ManifestContent)


ManifestBlock.model_rebuild()
