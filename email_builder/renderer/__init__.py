from .base import Renderer

__all__ = ["Renderer"]
