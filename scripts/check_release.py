"""Check that pyproject.toml, jvmcmd.__version__ and the release tag agree."""

from __future__ import annotations

import argparse
import os
import re
from pathlib import Path

import tomllib

import jvmcmd

TAG_PATTERN = re.compile(r"v(\d+\.\d+\.\d+)")


def read_project_version(pyproject_path: Path) -> str:
    data = tomllib.loads(pyproject_path.read_text(encoding="utf-8"))
    version = data.get("project", {}).get("version")
    if not isinstance(version, str) or not version:
        raise SystemExit(f"Could not find project.version in {pyproject_path}")
    return version


def check_module_version(project_version: str, module_version: str) -> None:
    if project_version != module_version:
        raise SystemExit(
            f"Version mismatch: project.version={project_version} "
            f"!= jvmcmd.__version__={module_version}"
        )


def check_tag(tag: str, project_version: str) -> None:
    match = TAG_PATTERN.fullmatch(tag)
    if match is None:
        raise SystemExit(f"Invalid release tag {tag!r}, expected vX.Y.Z")
    if match.group(1) != project_version:
        raise SystemExit(f"Release tag {tag} does not match project.version {project_version}")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--pyproject", type=Path, default=Path("pyproject.toml"))
    parser.add_argument("--tag", default=os.getenv("GITHUB_REF_NAME"))
    args = parser.parse_args(argv)

    project_version = read_project_version(args.pyproject)
    check_module_version(project_version, jvmcmd.__version__)
    if args.tag:
        check_tag(args.tag, project_version)
    print(f"Release check passed: {project_version}")


if __name__ == "__main__":
    main()
