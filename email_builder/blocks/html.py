"""Bloc HTML — fragment de markup libre."""
from typing import Union

from pydantic import Field

from .base import BlockProperties, BlockType


class HtmlProperties(BlockProperties):
    content: str = ""
    padding: dict[str, Union[int, str]] = Field(default_factory=lambda: {"top": 0, "right": 0, "bottom": 12, "left": 0})


HTML = BlockType("html", HtmlProperties, description="Fragment HTML")
