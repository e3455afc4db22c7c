"""Bloc Image — image seule, lien optionnel."""
from typing import Literal, Optional, Union

from pydantic import Field

from .base import BlockProperties, BlockType


class ImageProperties(BlockProperties):
    src: str = ""
    alt: str = ""
    link: Optional[str] = None
    width: str = "100%"
    align: Literal["left", "center", "right"] = "center"
    margin: dict[str, Union[int, str]] = Field(default_factory=lambda: {"top": 0, "right": 0, "bottom": 12, "left": 0})


IMAGE = BlockType("image", ImageProperties, required=("src",), description="Image")
