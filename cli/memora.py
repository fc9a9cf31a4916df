"""Memora CLI — validate manifests and list the artifacts they declare."""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

# Ensure project root is importable when running as script
PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from contracts.manifest import Manifest  # noqa: E402
from memora.errors import MemoraError  # noqa: E402
from memora.logging_utils import configure_logging  # noqa: E402
from memora.manifest_loader import load_manifest  # noqa: E402

DEFAULT_MANIFEST = ".memora.yml"
MANIFEST_ENV_VAR = "MEMORA_MANIFEST"


def _manifest_path(args: argparse.Namespace) -> str:
    return args.manifest or os.environ.get(MANIFEST_ENV_VAR) or DEFAULT_MANIFEST


def _load_or_exit(path: str) -> Manifest:
    try:
        return load_manifest(path)
    except MemoraError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)


def cmd_validate(args: argparse.Namespace) -> None:
    """Validate a memora manifest."""
    path = _manifest_path(args)
    manifest = _load_or_exit(path)

    print(f"Manifest OK: {path}")
    print(f"  Cache root:   {manifest.cache_root_dir}")
    print(f"  Artifacts:    {', '.join(manifest.artifact_names()) or '(none)'}")
    print(f"  Disable var:  {manifest.disable_env_var or '(none)'}")


def cmd_artifacts(args: argparse.Namespace) -> None:
    """List the artifacts of a manifest with their inputs and outputs."""
    manifest = _load_or_exit(_manifest_path(args))

    names = [args.artifact] if args.artifact else manifest.artifact_names()
    for name in names:
        try:
            artifact = manifest.get_artifact(name)
        except KeyError:
            print(f"Unknown artifact: {name}", file=sys.stderr)
            print(f"Known artifacts: {', '.join(manifest.artifact_names())}", file=sys.stderr)
            sys.exit(1)
        print(artifact.name)
        for p in artifact.inputs:
            print(f"  in:  {p}")
        for p in artifact.outputs:
            print(f"  out: {p}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="memora",
        description="Memora — build artifact cache manifest tool",
    )
    parser.add_argument("--log-level", default="WARNING", help="Logging level")
    sub = parser.add_subparsers(dest="command")

    # validate
    p_val = sub.add_parser("validate", help="Validate a memora manifest")
    p_val.add_argument("manifest", nargs="?", default=None, help="Path to manifest")
    p_val.set_defaults(func=cmd_validate)

    # artifacts
    p_art = sub.add_parser("artifacts", help="List artifacts declared in a manifest")
    p_art.add_argument("manifest", nargs="?", default=None, help="Path to manifest")
    p_art.add_argument("--artifact", "-a", help="Show only this artifact")
    p_art.set_defaults(func=cmd_artifacts)

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.command:
        parser.print_help()
        sys.exit(1)

    configure_logging(args.log_level)
    args.func(args)


if __name__ == "__main__":
    main()
