#!/usr/bin/env python3
from molot import evaluate, shell, target

import erllambda_release.provider  # noqa: F401  # pylint: disable=unused-import


@target(description="builds relx release", group="build")
def relx():
    shell("rebar3 release")


@target(description="builds erllambda release", group="build", depends=["relx", "erllambda:release"])
def package():
    shell("cd _build/default/rel && zip -qr ../myapp.zip myapp")


evaluate()
