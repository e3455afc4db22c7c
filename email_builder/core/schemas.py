"""
Schémas Pydantic du moteur de composition.
Arbre récursif : DocumentTree → Block → Block…

Un Block est un nœud variant discriminé par `type` : aucune sous-classe par
type, les propriétés sont un mapping déjà résolu (défauts ⊕ overrides ⊕ calculés).
"""
from typing import Any, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


# ── Visibilité ──────────────────────────────────────────────────────────────

ReceiverOperator = Literal["equals", "not_equals", "in", "not_in", "exists", "missing"]


class ReceiverCondition(BaseModel):
    """Condition sur un attribut du destinataire (ex: plan == "pro")."""
    model_config = ConfigDict(frozen=True)

    attribute: str
    operator: ReceiverOperator = "equals"
    value: Any = None

    def evaluate(self, attributes: dict) -> bool:
        present = self.attribute in attributes
        actual = attributes.get(self.attribute)
        if self.operator == "exists":
            return present
        if self.operator == "missing":
            return not present
        if self.operator == "equals":
            return present and actual == self.value
        if self.operator == "not_equals":
            return not present or actual != self.value
        choices = self.value if isinstance(self.value, (list, tuple, set)) else [self.value]
        if self.operator == "in":
            return present and actual in choices
        return not present or actual not in choices


class RenderContext(BaseModel):
    """Contexte de rendu : appareil, client mail et attributs du destinataire."""
    model_config = ConfigDict(frozen=True)

    device: Optional[str] = None
    client: Optional[str] = None
    receiver: dict[str, Any] = Field(default_factory=dict)


class Visibility(BaseModel):
    """
    Prédicat de visibilité — conjonction de trois axes indépendants.
    Un axe absent (ou vide) ne contraint rien.
    """
    model_config = ConfigDict(frozen=True)

    devices: Optional[List[str]] = None
    clients: Optional[List[str]] = None
    receiver: Optional[List[ReceiverCondition]] = None

    @field_validator("devices", "clients", mode="before")
    @classmethod
    def _one_or_many(cls, v):
        if isinstance(v, str):
            return [v]
        return v

    @field_validator("receiver", mode="before")
    @classmethod
    def _one_or_many_conditions(cls, v):
        if isinstance(v, dict):
            return [v]
        return v

    def matches(self, context: RenderContext) -> bool:
        if self.devices:
            if context.device is None or context.device.lower() not in {d.lower() for d in self.devices}:
                return False
        if self.clients:
            if context.client is None or context.client.lower() not in {c.lower() for c in self.clients}:
                return False
        if self.receiver:
            return all(cond.evaluate(context.receiver) for cond in self.receiver)
        return True


# ── Arbre ────────────────────────────────────────────────────────────────────

class Block(BaseModel):
    """Nœud de l'arbre — propriétés résolues, enfants ordonnés."""
    model_config = ConfigDict(frozen=True)

    type: str
    properties: dict[str, Any] = Field(default_factory=dict)
    children: List["Block"] = Field(default_factory=list)
    visibility: Optional[Visibility] = None

    def is_visible(self, context: RenderContext) -> bool:
        return self.visibility is None or self.visibility.matches(context)


class DocumentTree(BaseModel):
    """Document final remis au renderer."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    from_: str = Field(alias="from")
    subject: str
    preview_text: Optional[str] = None
    blocks: List[Block] = Field(default_factory=list)


Block.model_rebuild()
