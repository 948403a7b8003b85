"""Tests for the environment and filesystem adapters (infra/)."""

from __future__ import annotations

from pathlib import Path

import pytest

from manifest_tool.exceptions import ConfigurationError, SourceReadError
from manifest_tool.infra.environment import ProcessEnvironment
from manifest_tool.infra.filesystem import LocalFileSystem


class TestProcessEnvironment:
    def test_default_manifest_from_defaults(self) -> None:
        env = ProcessEnvironment({})
        assert env.default_manifest() == (
            "/etc/manifest-tool/environments/production/manifests/site.pp"
        )

    def test_default_manifest_follows_confdir_and_environment(self) -> None:
        env = ProcessEnvironment({
            "MANIFEST_TOOL_CONFDIR": "/opt/conf",
            "MANIFEST_TOOL_ENVIRONMENT": "staging",
        })
        assert env.default_manifest() == "/opt/conf/environments/staging/manifests/site.pp"

    def test_explicit_manifest_wins(self) -> None:
        env = ProcessEnvironment({
            "MANIFEST_TOOL_CONFDIR": "/opt/conf",
            "MANIFEST_TOOL_MANIFEST": "/srv/site.pp",
        })
        assert env.default_manifest() == "/srv/site.pp"

    def test_reads_os_environ_by_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MANIFEST_TOOL_MANIFEST", "/tmp/from-env.pp")
        assert ProcessEnvironment().default_manifest() == "/tmp/from-env.pp"

    def test_dump_validate_defaults_off(self) -> None:
        assert ProcessEnvironment({}).dump_validates_by_default() is False

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("1", True), ("TRUE", True), (" yes ", True), ("on", True),
         ("0", False), ("False", False), ("no", False), ("off", False), ("", False)],
    )
    def test_dump_validate_values(self, raw: str, expected: bool) -> None:
        env = ProcessEnvironment({"MANIFEST_TOOL_DUMP_VALIDATE": raw})
        assert env.dump_validates_by_default() is expected

    def test_dump_validate_rejects_garbage(self) -> None:
        env = ProcessEnvironment({"MANIFEST_TOOL_DUMP_VALIDATE": "maybe"})
        with pytest.raises(ConfigurationError, match="MANIFEST_TOOL_DUMP_VALIDATE"):
            env.dump_validates_by_default()


class TestLocalFileSystem:
    def test_exists_and_read(self, tmp_path: Path) -> None:
        manifest = tmp_path / "site.pp"
        manifest.write_text("$x = 1\n", encoding="utf-8")
        fs = LocalFileSystem()
        assert fs.exists(str(manifest))
        assert not fs.exists(str(tmp_path / "missing.pp"))
        assert fs.read_text(str(manifest)) == "$x = 1\n"

    def test_directory_read_is_mapped(self, tmp_path: Path) -> None:
        with pytest.raises(SourceReadError, match="Could not read"):
            LocalFileSystem().read_text(str(tmp_path))

    def test_undecodable_file_is_mapped(self, tmp_path: Path) -> None:
        manifest = tmp_path / "latin1.pp"
        manifest.write_bytes(b"$x = '\xff'")
        with pytest.raises(SourceReadError, match="Could not decode"):
            LocalFileSystem().read_text(str(manifest))
