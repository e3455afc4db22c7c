"""Bloc Container — regroupe des blocs enfants dans l'ordre déclaré."""
from typing import Optional, Union

from pydantic import Field

from .base import BlockProperties, BlockType


class ContainerProperties(BlockProperties):
    background_color: Optional[str] = None
    padding: dict[str, Union[int, str]] = Field(default_factory=lambda: {"top": 0, "right": 0, "bottom": 0, "left": 0})


CONTAINER = BlockType("container", ContainerProperties, composite=True, description="Conteneur")
