"""
Builds an erllambda release on top of a standard relx release.

The release must already be assembled under the build base directory; this
adds the npm runtime, a start script and the handler descriptor so that the
result can be started as a function handler.
"""

import json
import logging
import os
from pathlib import Path
from typing import NamedTuple

from .config import ReleaseConfig, getpath
from .errors import (
    InstallFailedError,
    ReleaseNameUndefinedError,
    ScriptMissingError,
    SupportDirMissingError,
    WriteFailedError,
)
from .extras import shell

SUPPORT_NAME = "erllambda"
START_MODE = 0o755


class HandlerInfo(NamedTuple):
    """Entry point of the function handler."""

    command: str
    module: str


def run(config: ReleaseConfig):
    """Augments release described by configuration.

    Steps run in a fixed order and the first failure aborts the rest. Files
    written before the failure are left in place.

    Args:
        config (ReleaseConfig): Host build state.

    Raises:
        ReleaseError: Raised by the first failed step.
    """

    logging.info("Running erllambda release generator")
    support_dir = locate_support_dir(config)
    script = start_script(support_dir)
    info = handler_info(config)
    target = target_dir(config)

    npm_install(support_dir, target)
    write_start_script(target, info.command, script)
    write_handler_file(target, info)


def locate_support_dir(config: ReleaseConfig) -> Path:
    """Finds erllambda directory, preferring a local checkout.

    Args:
        config (ReleaseConfig): Host build state.

    Raises:
        SupportDirMissingError: Raised when neither directory exists.

    Returns:
        Path: Support directory.
    """

    checkout = config.checkouts_dir / SUPPORT_NAME
    if checkout.is_dir():
        return checkout.absolute()

    dependency = config.base_dir / "lib" / SUPPORT_NAME
    if dependency.is_dir():
        return dependency

    raise SupportDirMissingError()


def release_name(config: ReleaseConfig) -> str:
    name = getpath(config.relx, ["release", "name"])
    if name is None or not str(name):
        raise ReleaseNameUndefinedError("undefined")
    return str(name)


def target_dir(config: ReleaseConfig) -> Path:
    return config.base_dir / "rel" / release_name(config)


def handler_info(config: ReleaseConfig) -> HandlerInfo:
    """Resolves handler command and module.

    The module defaults to the release name unless overridden by the
    erllambda settings block.
    """

    name = release_name(config)
    module = getpath(config.settings, ["module"])
    return HandlerInfo(command=f"bin/{name}", module=str(module) if module else name)


def start_script(support_dir: Path) -> bytes:
    path = support_dir / "priv" / "erlang-start"
    try:
        return path.read_bytes()
    except OSError as e:
        raise ScriptMissingError(e.strerror or str(e)) from e


def npm_install(support_dir: Path, target: Path):
    """Runs support directory npm installer against release directory.

    Args:
        support_dir (Path): Support directory.
        target (Path): Release directory.

    Raises:
        InstallFailedError: Raised when installer exits with non-zero status,
            or with status 127 when it cannot be spawned.
    """

    logging.info("Generating erllambda npm install")
    installer = support_dir / "priv" / "npm-install"
    try:
        code, output = shell([str(installer), str(support_dir), str(target)])
    except OSError as e:
        raise InstallFailedError(127, str(e)) from e

    if code != 0:
        raise InstallFailedError(code, output)


def write_start_script(target: Path, command: str, script: bytes):
    logging.info("Generating start script %s", command)
    path = target / command
    try:
        path.write_bytes(script)
        os.chmod(path, START_MODE)
    except OSError as e:
        raise WriteFailedError("generate_start_script_failed", e.strerror or str(e)) from e


def write_handler_file(target: Path, info: HandlerInfo):
    logging.info("Generating config file etc/handler.json")
    path = target / "etc" / "handler.json"
    content = json.dumps({"command": info.command, "module": info.module})
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    except OSError as e:
        raise WriteFailedError("generate_handler_file_failed", e.strerror or str(e)) from e
