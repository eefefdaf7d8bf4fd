import re
import sys
from pathlib import Path
from typing import Optional

import tomlkit

PYPROJECT_FILE = Path("pyproject.toml")
INIT_FILE = Path("src/css_selector_builder/__init__.py")
VERSION_ASSIGNMENT = r'__version__ = ["\'](.*?)["\']'


def validate_version(version: str) -> None:
    """Raises ValueError unless the version is MAJOR.MINOR.PATCH."""
    if not re.match(r"^\d+\.\d+\.\d+$", version):
        raise ValueError("Version must be in MAJOR.MINOR.PATCH format (e.g., 1.0.0)")


def read_pyproject_version(filepath: Path) -> Optional[str]:
    """Returns project.version from pyproject.toml, or None if the file is missing."""
    if not filepath.exists():
        return None
    data = tomlkit.parse(filepath.read_text(encoding="utf-8"))
    return data.get("project", {}).get("version")


def read_package_version(filepath: Path) -> Optional[str]:
    """Returns __version__ from the package __init__.py, or None if absent."""
    if not filepath.exists():
        return None
    match = re.search(VERSION_ASSIGNMENT, filepath.read_text(encoding="utf-8"))
    return match.group(1) if match else None


def write_pyproject_version(filepath: Path, new_version: str) -> None:
    """Sets project.version in pyproject.toml, preserving formatting."""
    if not filepath.exists():
        raise FileNotFoundError(f"File not found: {filepath}")
    data = tomlkit.parse(filepath.read_text(encoding="utf-8"))
    if "project" not in data or "version" not in data["project"]:
        raise KeyError("Invalid pyproject.toml: missing 'project.version' field")
    data["project"]["version"] = new_version
    filepath.write_text(tomlkit.dumps(data), encoding="utf-8")
    print(f"Updated {filepath} to version {new_version}")


def write_package_version(filepath: Path, new_version: str) -> None:
    """Rewrites the __version__ assignment in the package __init__.py."""
    if not filepath.exists():
        raise FileNotFoundError(f"File not found: {filepath}")
    content = filepath.read_text(encoding="utf-8")
    if not re.search(VERSION_ASSIGNMENT, content):
        raise ValueError(f"No __version__ found in {filepath}")
    content = re.sub(VERSION_ASSIGNMENT, f'__version__ = "{new_version}"', content)
    filepath.write_text(content, encoding="utf-8")
    print(f"Updated {filepath} to version {new_version}")


def check_versions() -> int:
    """Compares both version sources; returns a process exit code."""
    project_version = read_pyproject_version(PYPROJECT_FILE)
    package_version = read_package_version(INIT_FILE)
    if project_version != package_version:
        print(
            f"Version mismatch: pyproject.toml={project_version}, "
            f"__init__.py={package_version}"
        )
        return 1
    print(f"Versions in sync: {project_version}")
    return 0


def main() -> None:
    """Sets the version in pyproject.toml and __init__.py, or checks they agree."""
    if len(sys.argv) != 2:
        print("Usage: python update_version.py <new_version> | --check")
        sys.exit(1)

    if sys.argv[1] == "--check":
        sys.exit(check_versions())

    new_version = sys.argv[1]
    try:
        validate_version(new_version)
        if (
            read_pyproject_version(PYPROJECT_FILE) == new_version
            and read_package_version(INIT_FILE) == new_version
        ):
            print(f"Version {new_version} already set, skipping update")
            return
        write_pyproject_version(PYPROJECT_FILE, new_version)
        write_package_version(INIT_FILE, new_version)
    except (ValueError, FileNotFoundError, KeyError) as e:
        print(f"Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
