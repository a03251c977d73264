"""Tests for metadata module."""

from pathlib import Path
from unittest.mock import patch

import pytoolkit_optional
from pytoolkit_optional import metadata
from pytoolkit_optional.metadata import (
    DISTRIBUTION_NAME,
    NAME,
    VERSION,
    get_package_metadata,
)


class TestMetadata:
    def test_name(self) -> None:
        """プロジェクト名が取得できる。"""
        assert NAME == "pytoolkit-optional"

    def test_version_exported(self) -> None:
        """パッケージの__version__がメタデータのバージョンと一致する。"""
        assert pytoolkit_optional.__version__ == VERSION

    def test_load_from_given_path(self, tmp_path: Path) -> None:
        """指定したpyproject.tomlから読み込める。"""
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text(
            '[project]\nname = "pytoolkit-optional"\nversion = "1.2.3"\n',
            encoding="utf-8",
        )

        loaded = get_package_metadata(pyproject)

        assert loaded["project"]["name"] == DISTRIBUTION_NAME
        assert loaded["project"].get("version") == "1.2.3"

    def test_foreign_pyproject_is_ignored(self, tmp_path: Path) -> None:
        """別プロジェクトのpyproject.tomlは使わずインストール情報に切り替える。"""
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text(
            '[tool.poetry]\nname = "other"\nversion = "9.9.9"\n', encoding="utf-8"
        )

        loaded = get_package_metadata(pyproject)

        assert loaded["project"]["name"] == DISTRIBUTION_NAME
        assert loaded["project"].get("version") != "9.9.9"

    def test_other_project_name_is_ignored(self, tmp_path: Path) -> None:
        """[project]があってもnameが異なれば使わない。"""
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text(
            '[project]\nname = "other"\nversion = "9.9.9"\n', encoding="utf-8"
        )

        loaded = get_package_metadata(pyproject)

        assert loaded["project"]["name"] == DISTRIBUTION_NAME

    def test_invalid_toml_is_ignored(self, tmp_path: Path) -> None:
        """壊れたpyproject.tomlでも例外にならない。"""
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[project\n", encoding="utf-8")

        loaded = get_package_metadata(pyproject)

        assert loaded["project"]["name"] == DISTRIBUTION_NAME

    def test_not_installed_without_pyproject(self, tmp_path: Path) -> None:
        """pyproject.tomlもインストール情報もない場合はバージョン不明になる。"""
        with patch.object(
            metadata.importlib_metadata,
            "metadata",
            side_effect=metadata.importlib_metadata.PackageNotFoundError(
                DISTRIBUTION_NAME
            ),
        ):
            loaded = get_package_metadata(tmp_path / "missing.toml")

        assert loaded["project"]["name"] == DISTRIBUTION_NAME
        assert loaded["project"].get("version", "unknown") == "unknown"
