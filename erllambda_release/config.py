"""
Build configuration consumed by the release augmenter.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping, Union

from munch import Munch, munchify
from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from .errors import ConfigError


@dataclass(frozen=True)
class ReleaseConfig:
    """Read-only view of the host build state."""

    base_dir: Path
    relx: Mapping[str, Any] = field(default_factory=Munch)
    settings: Mapping[str, Any] = field(default_factory=Munch)
    checkouts_dir: Path = Path("_checkouts")


def load_config(
    path: Union[str, Path] = "build.yaml",
    base_dir: Union[str, Path] = os.path.join("_build", "default"),
    checkouts_dir: Union[str, Path] = "_checkouts",
) -> ReleaseConfig:
    """Loads release configuration from a YAML build file.

    Arguments:
        path {Union[str, Path]} -- Path to build file. (default: {'build.yaml'})
        base_dir {Union[str, Path]} -- Build output directory. (default: {'_build/default'})
        checkouts_dir {Union[str, Path]} -- Local checkout overrides. (default: {'_checkouts'})

    Raises:
        ConfigError: Raised when file is missing or cannot be parsed.

    Returns:
        ReleaseConfig -- Loaded configuration.
    """

    if not os.path.isfile(path):
        raise ConfigError(str(path), "file not found")

    try:
        with open(path, "r", encoding="utf-8") as stream:
            data = YAML(typ="safe").load(stream)
    except (OSError, UnicodeDecodeError, YAMLError) as exc:
        raise ConfigError(str(path), exc) from exc

    data = munchify(data or {})
    if not isinstance(data, dict):
        raise ConfigError(str(path), "top level must be a mapping")

    return ReleaseConfig(
        base_dir=Path(base_dir),
        relx=getpath(data, ["relx"]) or Munch(),
        settings=getpath(data, ["erllambda"]) or Munch(),
        checkouts_dir=Path(checkouts_dir),
    )


def getpath(x: Any, keys: list) -> Any:
    """Gets recursive key path from dictionary or list.

    Arguments:
        x {Any} -- Dictionary or list.
        keys {list} -- List of recursive keys to retrieve.

    Returns:
        Any -- Retrieved dictionary, list or None.
    """

    for key in keys:
        if isinstance(x, dict):
            if key not in x:
                return None
        elif isinstance(x, list):
            if not isinstance(key, int) or not -len(x) <= key < len(x):
                return None
        else:
            return None
        x = x[key]
    return x
