import os
from pathlib import Path

import pytest

from erllambda_release.config import ReleaseConfig

START_SCRIPT = b"#!/bin/sh\necho hi"


def make_support(root: Path, status: int = 0) -> Path:
    """Creates erllambda directory with start template and npm installer."""

    priv = root / "erllambda" / "priv"
    priv.mkdir(parents=True)
    (priv / "erlang-start").write_bytes(START_SCRIPT)
    installer = priv / "npm-install"
    installer.write_text(f'#!/bin/sh\necho "installing into $2"\nexit {status}\n')
    os.chmod(installer, 0o755)
    return root / "erllambda"


def release_config(project: Path, module=None, name="myapp") -> ReleaseConfig:
    relx = {"release": {"name": name, "version": "0.1.0", "apps": [name]}} if name else {}
    settings = {"module": module} if module is not None else {}
    return ReleaseConfig(
        base_dir=project / "_build" / "default",
        relx=relx,
        settings=settings,
        checkouts_dir=project / "_checkouts",
    )


@pytest.fixture
def project(tmp_path, monkeypatch):
    """Project root with an assembled relx release for myapp."""

    monkeypatch.chdir(tmp_path)
    (tmp_path / "_build" / "default" / "rel" / "myapp" / "bin").mkdir(parents=True)
    return tmp_path
