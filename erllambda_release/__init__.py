from ._version import __version__
from .errors import ReleaseError, format_error
from .release import HandlerInfo, run

__all__ = [
    "HandlerInfo",
    "ReleaseError",
    "format_error",
    "run",
]
