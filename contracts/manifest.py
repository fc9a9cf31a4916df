"""Manifest (.memora.yml) schema — Pydantic models.

A manifest names the cache root of a repository and the artifacts whose
outputs the cache stores.  Each artifact lists the files it depends on
(inputs) and the files it produces (outputs).
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, model_validator


# ── Artifacts ────────────────────────────────────────────────────────


class ArtifactSpec(BaseModel):
    """Body of one entry under ``artifacts:`` before it is given its name."""

    inputs: list[Path]
    outputs: list[Path]


class Artifact(BaseModel):
    """One cacheable unit.

    ``name`` is passed as the ``artifact`` argument to memora subcommands, so
    it should be kept short.
    """

    name: str
    inputs: list[Path] = []
    outputs: list[Path] = []


# ── Root manifest ────────────────────────────────────────────────────


class Manifest(BaseModel):
    # Absolute, or relative to the root of the repository.
    cache_root_dir: Path
    artifacts: list[Artifact] = []
    # If this environment variable is set, the cache is disabled.
    disable_env_var: str | None = None

    @model_validator(mode="after")
    def _check_unique_names(self) -> "Manifest":
        seen: set[str] = set()
        for artifact in self.artifacts:
            if artifact.name in seen:
                raise ValueError(f"Duplicate artifact name: '{artifact.name}'")
            seen.add(artifact.name)
        return self

    def artifact_names(self) -> list[str]:
        return [a.name for a in self.artifacts]

    def get_artifact(self, name: str) -> Artifact:
        """Return the artifact called *name*; raise KeyError if there is none."""
        for artifact in self.artifacts:
            if artifact.name == name:
                return artifact
        raise KeyError(f"Unknown artifact: {name}")

    def resolve_cache_root(self, repo_root: str | Path) -> Path:
        """Return the cache root, joined onto *repo_root* when it is relative."""
        if self.cache_root_dir.is_absolute():
            return self.cache_root_dir
        return Path(repo_root) / self.cache_root_dir
