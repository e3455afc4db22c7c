"""Bloc Divider — séparateur horizontal."""
from typing import Union

from pydantic import Field

from .base import BlockProperties, BlockType


class DividerProperties(BlockProperties):
    color: str = "#e5e5e5"
    thickness: int = Field(default=1, ge=1)
    margin: dict[str, Union[int, str]] = Field(default_factory=lambda: {"top": 12, "right": 0, "bottom": 12, "left": 0})


DIVIDER = BlockType("divider", DividerProperties, description="Séparateur")
