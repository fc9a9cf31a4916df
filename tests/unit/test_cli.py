"""Unit tests for the memora CLI."""

from __future__ import annotations

from pathlib import Path

import pytest

from cli.memora import MANIFEST_ENV_VAR, main


MANIFEST = """\
cache_root_dir: .cache
disable_env_var: NO_CACHE
artifacts:
  lib:
    inputs: [src/lib.c]
    outputs: [out/lib.a]
  bin:
    inputs: [src/main.c]
    outputs: [out/bin]
"""


@pytest.fixture()
def manifest_path(tmp_path: Path) -> Path:
    path = tmp_path / ".memora.yml"
    path.write_text(MANIFEST)
    return path


class TestValidate:
    def test_valid(self, manifest_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        main(["validate", str(manifest_path)])
        out = capsys.readouterr().out
        assert "Manifest OK" in out
        assert "lib, bin" in out
        assert "NO_CACHE" in out

    def test_env_var_selects_manifest(
        self,
        manifest_path: Path,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        monkeypatch.setenv(MANIFEST_ENV_VAR, str(manifest_path))
        main(["validate"])
        assert str(manifest_path) in capsys.readouterr().out

    def test_default_manifest_in_cwd(
        self,
        manifest_path: Path,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        monkeypatch.delenv(MANIFEST_ENV_VAR, raising=False)
        monkeypatch.chdir(manifest_path.parent)
        main(["validate"])
        assert "Manifest OK: .memora.yml" in capsys.readouterr().out

    def test_missing_manifest_exits(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        with pytest.raises(SystemExit) as excinfo:
            main(["validate", str(tmp_path / "missing.yml")])
        assert excinfo.value.code == 1
        assert "Cannot open manifest" in capsys.readouterr().err

    def test_no_command_prints_help(self) -> None:
        with pytest.raises(SystemExit):
            main([])


class TestArtifacts:
    def test_lists_all(self, manifest_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        main(["artifacts", str(manifest_path)])
        lines = capsys.readouterr().out.splitlines()
        assert lines[0] == "lib"
        assert "  in:  src/lib.c" in lines
        assert f"  in:  {manifest_path}" in lines
        assert "bin" in lines
        assert lines.index("bin") > lines.index("lib")

    def test_single_artifact(self, manifest_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        main(["artifacts", str(manifest_path), "--artifact", "bin"])
        out = capsys.readouterr().out
        assert out.startswith("bin\n")
        assert "src/lib.c" not in out

    def test_unknown_artifact(self, manifest_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as excinfo:
            main(["artifacts", str(manifest_path), "-a", "nope"])
        assert excinfo.value.code == 1
        assert "Unknown artifact: nope" in capsys.readouterr().err
