"""Bloc Button — lien présenté en bouton."""
from typing import Literal

from pydantic import Field

from .base import BlockProperties, BlockType


class ButtonProperties(BlockProperties):
    text: str = "Lire la suite"
    href: str = "#"
    background_color: str = "#667eea"
    color: str = "#ffffff"
    border_radius: int = Field(default=4, ge=0)
    align: Literal["left", "center", "right"] = "left"


BUTTON = BlockType("button", ButtonProperties, required=("href",), description="Bouton")
