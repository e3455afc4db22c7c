"""
Blocs — types intégrés + registry ouvert.
"""
from .base import BlockProperties, BlockType, Expander
from .heading import HEADING, HeadingProperties
from .html import HTML, HtmlProperties
from .image import IMAGE, ImageProperties
from .button import BUTTON, ButtonProperties
from .spacer import SPACER, SpacerProperties
from .divider import DIVIDER, DividerProperties
from .container import CONTAINER, ContainerProperties
from .feed import DEFAULT_CHILD_POLICY, FeedProperties
from .registry import BUILTIN_TYPES, BlockRegistry, default_registry

__all__ = [
    # Base
    "BlockProperties", "BlockType", "Expander",
    # Types
    "HEADING", "HeadingProperties",
    "HTML", "HtmlProperties",
    "IMAGE", "ImageProperties",
    "BUTTON", "ButtonProperties",
    "SPACER", "SpacerProperties",
    "DIVIDER", "DividerProperties",
    "CONTAINER", "ContainerProperties",
    "DEFAULT_CHILD_POLICY", "FeedProperties",
    # Registry
    "BUILTIN_TYPES", "BlockRegistry", "default_registry",
]
