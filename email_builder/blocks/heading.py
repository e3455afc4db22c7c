"""Bloc Heading — titre de niveau 1 à 6."""
from typing import Literal, Optional, Union

from pydantic import Field

from .base import BlockProperties, BlockType


class HeadingProperties(BlockProperties):
    content: str = ""
    level: int = Field(default=1, ge=1, le=6)
    font_size: int = Field(default=24, gt=0)
    font_family: Optional[str] = None
    color: str = "#111111"
    align: Literal["left", "center", "right"] = "left"
    margin: dict[str, Union[int, str]] = Field(default_factory=lambda: {"top": 0, "right": 0, "bottom": 12, "left": 0})


HEADING = BlockType("heading", HeadingProperties, description="Titre")
