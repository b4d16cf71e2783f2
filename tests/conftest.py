#!/usr/bin/env python3

import sys
from pathlib import Path

import pytest


def _repo_path() -> Path:
    return Path(__file__).resolve().parent.parent


def _add_python_paths() -> None:
    # make the repo directory available
    sys.path.insert(0, str(_repo_path()))


_add_python_paths()


@pytest.fixture(name="outputs_folder")
def fixture_outputs_folder(tmp_path: Path) -> Path:
    p = tmp_path / "outputs"
    p.mkdir()
    return p
