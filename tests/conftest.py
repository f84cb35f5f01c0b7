"""
Shared fixtures for building module directories on disk.

A project is a git repository with no commits holding a package.json for
``ayo@0.0.1`` and an index.js, both untracked. A fake module only has the
marker entries and never touches git.
"""
import json
import os
import subprocess
from pathlib import Path

import pytest

# Keeps user/system git config (default branch, hooks) out of fixtures
GIT_ENV = {
    **os.environ,
    "GIT_CONFIG_NOSYSTEM": "1",
    "GIT_CONFIG_GLOBAL": os.devnull,
}


def _run_git(path, *args):
    """Run git against the repository at path. Arguments may be bytes."""
    path = os.fsencode(Path(path))
    return subprocess.run(
        [b"git", b"--git-dir=" + os.path.join(path, b".git"), b"--work-tree=" + path,
         *(os.fsencode(a) for a in args)],
        capture_output=True,
        check=True,
        env=GIT_ENV,
    )


def _create_project(path, name="ayo", version="0.0.1") -> Path:
    path = Path(path)
    path.mkdir(parents=True, exist_ok=True)
    subprocess.run(
        ["git", "-c", "init.defaultBranch=master", "init", str(path)],
        capture_output=True,
        check=True,
        env=GIT_ENV,
    )
    (path / "package.json").write_text(json.dumps({"name": name, "version": version}, indent=2))
    (path / "index.js").write_text("module.exports = {}\n")
    return path


def _create_fake_module(path, manifest=None) -> Path:
    path = Path(path)
    (path / ".git").mkdir(parents=True, exist_ok=True)
    (path / "package.json").write_text(json.dumps(manifest if manifest is not None else {}))
    return path


@pytest.fixture
def run_git():
    """Callable running git against a repository: run_git(path, *args)."""
    return _run_git


@pytest.fixture
def create_project():
    """Callable creating a git project: create_project(path, name=, version=)."""
    return _create_project


@pytest.fixture
def create_fake_module():
    """Callable creating a marker-only module: create_fake_module(path, manifest=None)."""
    return _create_fake_module
