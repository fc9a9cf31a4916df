"""Manifest loader — parse and validate .memora.yml."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ValidationError
from yaml.constructor import ConstructorError
from yaml.nodes import MappingNode, ScalarNode

from contracts.manifest import Artifact, ArtifactSpec, Manifest
from memora.errors import ManifestIOError, ManifestSyntaxError

logger = logging.getLogger(__name__)


class _ManifestDocument(BaseModel):
    """The manifest as written on disk; ``artifacts`` keeps declaration order."""

    cache_root_dir: Path
    artifacts: dict[str, ArtifactSpec]
    disable_env_var: str | None = None


class _UniqueKeyLoader(yaml.SafeLoader):
    """SafeLoader that refuses mappings with a repeated key.

    The manifest has no numeric fields, so integer and float scalars are kept
    as the text written in the file (an artifact may be called ``2021``).
    """

    def construct_scalar_text(self, node: ScalarNode) -> str:
        return self.construct_scalar(node)

    def construct_mapping(self, node: MappingNode, deep: bool = False) -> dict[Any, Any]:
        # Keys pulled in by a ``<<`` merge may be overridden; only keys
        # written twice in this mapping are rejected.
        seen: dict[Any, Any] = {}
        for key_node, _ in node.value:
            if key_node.tag == "tag:yaml.org,2002:merge":
                continue
            key = self.construct_object(key_node, deep=deep)
            if key in seen:
                raise ConstructorError(
                    "while constructing a mapping",
                    seen[key],
                    f"found duplicate key '{key}'",
                    key_node.start_mark,
                )
            seen[key] = key_node.start_mark
        return super().construct_mapping(node, deep=deep)


_UniqueKeyLoader.add_constructor("tag:yaml.org,2002:int", _UniqueKeyLoader.construct_scalar_text)
_UniqueKeyLoader.add_constructor("tag:yaml.org,2002:float", _UniqueKeyLoader.construct_scalar_text)


def _parse(stream: Any) -> _ManifestDocument:
    data = yaml.load(stream, Loader=_UniqueKeyLoader)
    if not isinstance(data, dict):
        raise TypeError(f"manifest must be a YAML mapping, got {type(data).__name__}")
    return _ManifestDocument(**data)


def load_manifest(path: str | Path) -> Manifest:
    """Load a manifest file and return a validated Manifest.

    The path of the manifest is appended to the inputs of every artifact, so
    that changing the manifest invalidates all cached artifacts.
    """
    p = Path(path)
    logger.debug("Loading manifest %s", p)

    try:
        f = p.open("r", encoding="utf-8")
    except OSError as exc:
        raise ManifestIOError(f"Cannot open manifest '{p}'!", exc) from exc

    with f:
        try:
            document = _parse(f)
        except OSError as exc:
            raise ManifestIOError(f"Cannot read manifest '{p}'!", exc) from exc
        except (yaml.YAMLError, UnicodeDecodeError, TypeError, ValidationError) as exc:
            raise ManifestSyntaxError(f"Syntax error in manifest '{p}'!", exc) from exc

    artifacts = [
        Artifact(name=name, inputs=list(spec.inputs), outputs=list(spec.outputs))
        for name, spec in document.artifacts.items()
    ]
    # Add path of manifest to inputs of each artifact.
    for artifact in artifacts:
        artifact.inputs.append(p)

    try:
        manifest = Manifest(
            cache_root_dir=document.cache_root_dir,
            artifacts=artifacts,
            disable_env_var=document.disable_env_var,
        )
    except ValidationError as exc:
        raise ManifestSyntaxError(f"Syntax error in manifest '{p}'!", exc) from exc

    logger.debug("Loaded %d artifact(s) from %s", len(manifest.artifacts), p)
    return manifest
