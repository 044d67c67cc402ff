import logging
import sys

import molot

from .config import load_config
from .errors import ConfigError, ReleaseError, format_error
from .release import run

ERLLAMBDA_CONFIG = molot.envarg(
    "ERLLAMBDA_CONFIG",
    default="build.yaml",
    description="build file declaring the relx release",
)
ERLLAMBDA_BASE_DIR = molot.envarg(
    "ERLLAMBDA_BASE_DIR",
    default="_build/default",
    description="build output directory containing rel/ and lib/",
)
ERLLAMBDA_CHECKOUTS_DIR = molot.envarg(
    "ERLLAMBDA_CHECKOUTS_DIR",
    default="_checkouts",
    description="directory with local dependency checkouts",
)


@molot.target(
    name="erllambda:release",
    description="generates erllambda release on top of relx release",
    group="erllambda",
)
def release():
    """Molot target to augment the assembled release for erllambda."""

    try:
        config = load_config(
            ERLLAMBDA_CONFIG,
            base_dir=ERLLAMBDA_BASE_DIR,
            checkouts_dir=ERLLAMBDA_CHECKOUTS_DIR,
        )
        run(config)
    except ConfigError as e:
        logging.error("erllambda_release: %s", e)
        sys.exit(1)
    except ReleaseError as e:
        logging.error(format_error(e))
        sys.exit(1)
