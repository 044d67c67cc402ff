from typing import Any, Optional


class ReleaseError(Exception):
    """Error raised while augmenting a release."""

    error = "release_failed"

    def __init__(self, reason: Optional[Any] = None):
        super().__init__(reason)
        self.reason = reason


class SupportDirMissingError(ReleaseError):
    """Neither checkout nor dependency erllambda directory exists."""

    error = "erllambda_dep_missing"


class ReleaseNameUndefinedError(ReleaseError):
    """Build configuration declares no release."""

    error = "relx_release_undefined"


class ScriptMissingError(ReleaseError):
    """Start script template cannot be read."""

    error = "erllambda_script_missing"


class InstallFailedError(ReleaseError):
    """Install script exited with non-zero status."""

    error = "npm_install_failed"

    def __init__(self, code: int, output: str = ""):
        super().__init__(code)
        self.code = code
        self.output = output


class WriteFailedError(ReleaseError):
    """Generated file could not be written."""

    def __init__(self, error: str, reason: Any):
        super().__init__(reason)
        self.error = error


class ConfigError(Exception):
    """Build configuration cannot be loaded."""

    def __init__(self, path: str, reason: Any):
        super().__init__(f"cannot load {path}: {reason}")
        self.path = path
        self.reason = reason


def format_error(e: ReleaseError) -> str:
    """Formats release error for output.

    Args:
        e (ReleaseError): Raised error.

    Returns:
        str: Human-readable message.
    """

    if e.reason is None:
        return f"erllambda_release: {e.error}"
    return f"erllambda_release: {e.error} because {e.reason}"
