"""Memora — manifest loading for the build artifact cache."""

from memora.errors import ManifestIOError, ManifestSyntaxError, MemoraError, MemoraIOError
from memora.manifest_loader import load_manifest

__all__ = [
    "ManifestIOError",
    "ManifestSyntaxError",
    "MemoraError",
    "MemoraIOError",
    "load_manifest",
]
