"""Manifest — schema + chargement."""
from .schema import ManifestBlock, ManifestContent, ManifestDocument
from .parser import load_manifest

__all__ = [
    "ManifestBlock",
    "ManifestContent",
    "ManifestDocument",
    "load_manifest",
]
