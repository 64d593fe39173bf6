"""
Read project metadata (name, version, dependencies) from the nearest pyproject.toml.

Used by the logging setup to stamp the service name and version on JSON records.
"""

from pathlib import Path
from importlib import metadata as importlib_metadata
from typing import Any
import re
import tomllib


def find_pyproject(start: Path, max_up: int = 5) -> Path | None:
    """Walk up from `start` (at most `max_up` levels) looking for pyproject.toml."""
    p = start
    for _ in range(max_up):
        candidate = p / "pyproject.toml"
        if candidate.exists():
            return candidate
        if p.parent == p:
            break
        p = p.parent
    return None


def load_pyproject_data(pyproject_path: Path) -> dict:
    # tomllib wants a binary file object
    with pyproject_path.open("rb") as f:
        return tomllib.load(f)


def get_pyproject_value(
    key: str,
    start: str | Path | None = None,
    max_up: int = 5,
    default: Any = None,
) -> Any:
    """
    Return the value for the dot-separated `key` ("project.version") from the
    nearest pyproject.toml, or `default` when the file, or the key, is missing
    or the file cannot be parsed.

    The search starts at `start`, or at this module's folder.
    """
    start_path = Path(start).resolve() if start is not None else Path(__file__).resolve().parent

    pyproject = find_pyproject(start=start_path, max_up=max_up)
    if not pyproject or not key:
        return default

    try:
        data = load_pyproject_data(pyproject)
    except (OSError, tomllib.TOMLDecodeError):
        return default

    cur = data
    for part in key.split("."):
        if isinstance(cur, dict) and part in cur:
            cur = cur[part]
        else:
            return default
    return cur


def get_project_name(
    start: Path | str | None = None,
    max_up: int = 5,
    default: str | None = None,
) -> str | None:
    return get_pyproject_value("project.name", start=start, max_up=max_up, default=default)


def get_project_version(
    start: Path | str | None = None,
    max_up: int = 5,
    default: str = "unknown",
    prefer_installed: bool = True,
) -> str:
    """
    Version of the running project.

    The installed distribution's metadata wins when `prefer_installed` is set
    (containers ship without the source tree), then project.version from
    pyproject.toml, then `default`.
    """
    name = get_project_name(start=start, max_up=max_up, default=None)
    if prefer_installed and name:
        try:
            return importlib_metadata.version(name)
        except importlib_metadata.PackageNotFoundError:
            pass

    val = get_pyproject_value("project.version", start=start, max_up=max_up, default=None)
    return val if val is not None else default


def get_dependency_requirement(
    pkg_name: str,
    start: Path | str | None = None,
    max_up: int = 5,
    default: str | None = None,
) -> str | None:
    """
    Full requirement string for `pkg_name` in project.dependencies
    (e.g. "sqlalchemy[asyncio]>=2.0"), or `default`.
    """
    deps = get_pyproject_value("project.dependencies", start=start, max_up=max_up, default=None)
    if not isinstance(deps, list):
        return default

    pat = re.compile(rf"^\s*{re.escape(pkg_name)}(\[.*?\])?\s*([<>=!~;].*)?$", re.IGNORECASE)
    for item in deps:
        if isinstance(item, str) and pat.match(item):
            return item
    return default


__all__ = [
    "find_pyproject",
    "load_pyproject_data",
    "get_pyproject_value",
    "get_project_name",
    "get_project_version",
    "get_dependency_requirement",
]
