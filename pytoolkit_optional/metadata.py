import tomllib
from importlib import metadata as importlib_metadata
from pathlib import Path
from typing import Any, cast

from typing_extensions import NotRequired, ReadOnly, Required, TypedDict

DISTRIBUTION_NAME = "pytoolkit-optional"
PYPROJECT_PATH = Path(__file__).parent.parent / "pyproject.toml"


class ProjectInfo(TypedDict):
    """[project]セクションの型定義"""

    name: ReadOnly[Required[str]]
    version: ReadOnly[NotRequired[str]]
    description: ReadOnly[NotRequired[str]]
    readme: ReadOnly[NotRequired[str | dict[str, str]]]
    requires_python: ReadOnly[NotRequired[str]]
    license: ReadOnly[NotRequired[str | dict[str, str]]]
    authors: ReadOnly[NotRequired[list[dict[str, str]]]]
    keywords: ReadOnly[NotRequired[list[str]]]
    dependencies: ReadOnly[NotRequired[list[str]]]


class ProjectUrls(TypedDict):
    """[project.urls]セクションの型定義"""

    homepage: ReadOnly[NotRequired[str]]
    repository: ReadOnly[NotRequired[str]]


class PyProjectToml(TypedDict, total=False):
    """pyproject.toml全体の型定義

    https://peps.python.org/pep-0621/
    """

    project: ReadOnly[Required[ProjectInfo]]
    urls: ReadOnly[NotRequired[ProjectUrls]]


def _from_installed_distribution() -> PyProjectToml:
    try:
        dist = importlib_metadata.metadata(DISTRIBUTION_NAME)
    except importlib_metadata.PackageNotFoundError:
        return {"project": {"name": DISTRIBUTION_NAME}}
    project: ProjectInfo = {
        "name": dist["Name"],
        "version": dist["Version"],
        "description": dist.get("Summary", ""),
        "dependencies": dist.get_all("Requires-Dist") or [],
    }
    return {"project": project}


def _load_pyproject(path: Path) -> dict[str, Any] | None:
    if not path.is_file():
        return None
    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError:
        return None


def get_package_metadata(path: Path = PYPROJECT_PATH) -> PyProjectToml:
    """Return the package metadata.

    pyproject.tomlがない場合(wheelからインストールした場合)や、
    別プロジェクトのpyproject.tomlだった場合は
    インストール済みディストリビューションのメタデータを使う。
    """
    data = _load_pyproject(path)
    if data is None or data.get("project", {}).get("name") != DISTRIBUTION_NAME:
        return _from_installed_distribution()
    return cast(PyProjectToml, data)


METADATA = get_package_metadata()
NAME = METADATA["project"]["name"]
VERSION = METADATA["project"].get("version", "unknown")
