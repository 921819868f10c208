"""splitcalc version lookup."""

import tomllib
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _metadata_version
from pathlib import Path

DIST_NAME = "splitcalc"
UNKNOWN_VERSION = "0.0.0"

_PYPROJECT = Path(__file__).resolve().parents[2] / "pyproject.toml"


def _version_from_pyproject(path: Path) -> str | None:
    """The [project] version of a source checkout, if ``path`` belongs to splitcalc."""
    if not path.is_file():
        return None
    with path.open("rb") as f:
        project = tomllib.load(f).get("project", {})
    if project.get("name") != DIST_NAME:
        return None
    return project.get("version")


def get_version(pyproject: Path = _PYPROJECT) -> str:
    """Version of a source checkout first, then of the installed distribution."""
    found = _version_from_pyproject(pyproject)
    if found:
        return found
    try:
        return _metadata_version(DIST_NAME)
    except PackageNotFoundError:
        return UNKNOWN_VERSION


__version__ = get_version()
