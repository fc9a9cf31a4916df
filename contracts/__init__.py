"""Shared contracts — source of truth for all Memora data types."""

from contracts.manifest import Artifact, ArtifactSpec, Manifest

__all__ = [
    # manifest
    "Artifact",
    "ArtifactSpec",
    "Manifest",
]
