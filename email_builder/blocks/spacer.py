"""Bloc Spacer — espace vertical."""
from pydantic import Field

from .base import BlockProperties, BlockType


class SpacerProperties(BlockProperties):
    height: int = Field(default=16, ge=0)


SPACER = BlockType("spacer", SpacerProperties, description="Espace vertical")
