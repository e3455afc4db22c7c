"""
Base des types de blocs.
Un type = tag + modèle de propriétés (défauts + validation) + capacités
(composite, propriétés requises, expanseur optionnel).
"""
from typing import Any, Awaitable, Callable, Mapping, Optional, Sequence

from pydantic import BaseModel, ConfigDict, ValidationError

from ..core.errors import BlockPath, InvalidBlockProperties, MissingRequiredProperty
from ..core.resolver import resolve
from ..core.schemas import Block, Visibility


class BlockProperties(BaseModel):
    """Propriétés d'un bloc. Les clés inconnues sont conservées telles quelles."""
    model_config = ConfigDict(extra="allow")


# expander(description, context, path) -> blocs à insérer à la place du bloc
Expander = Callable[[Any, Any, BlockPath], Awaitable[list[Block]]]


class BlockType:
    """Entrée du registry : tout ce que le moteur sait d'un type de bloc."""

    def __init__(
        self,
        tag: str,
        properties_model: Optional[type[BlockProperties]] = None,
        *,
        defaults: Optional[Mapping[str, Any]] = None,
        composite: bool = False,
        required: Sequence[str] = (),
        expander: Optional[Expander] = None,
        description: str = "",
    ):
        self.tag = tag
        self.properties_model = properties_model
        self._defaults = dict(defaults or {})
        self.composite = composite
        self.required = tuple(required)
        self.expander = expander
        self.description = description

    def __repr__(self) -> str:
        return f"BlockType({self.tag!r})"

    def builtin_defaults(self) -> dict[str, Any]:
        if self.properties_model is not None:
            return {**self.properties_model().model_dump(), **self._defaults}
        return dict(self._defaults)

    def validate(self, props: dict[str, Any], path: BlockPath = ()) -> dict[str, Any]:
        """Vérifie les propriétés requises puis le typage via le modèle."""
        for name in self.required:
            if props.get(name) in (None, ""):
                raise MissingRequiredProperty(name, path)
        if self.properties_model is None:
            return props
        try:
            return self.properties_model.model_validate(props).model_dump()
        except ValidationError as e:
            detail = "; ".join(
                f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()
            )
            raise InvalidBlockProperties(self.tag, path, detail) from e

    def instantiate(
        self,
        overrides: Optional[Mapping[str, Any]] = None,
        computed: Optional[Mapping[str, Any]] = None,
        *,
        document_defaults: Optional[Mapping[str, Any]] = None,
        path: BlockPath = (),
        visibility: Optional[Visibility] = None,
        children: Optional[list[Block]] = None,
    ) -> Block:
        """Une seule passe de résolution, validation, puis construction du nœud."""
        props = resolve(
            self.tag,
            self.builtin_defaults(),
            overrides,
            computed,
            document_defaults=document_defaults,
        )
        return Block(
            type=self.tag,
            properties=self.validate(props, path),
            children=children or [],
            visibility=visibility,
        )
