"""zotsync package exports.

Keep package import lightweight by lazily importing submodules.
"""

from typing import TYPE_CHECKING, Any

__version__ = "1.0.0"

if TYPE_CHECKING:
    from .config import AppConfig
    from .core.reconcile import initialize

__all__ = ["AppConfig", "initialize", "merge", "derive_requests", "get_defaults"]


def __getattr__(name: str) -> Any:
    """Lazily resolve top-level exports."""
    if name == "AppConfig":
        from .config import AppConfig

        return AppConfig

    if name == "initialize":
        from .core.reconcile import initialize

        return initialize

    if name == "merge":
        from .core.merge import merge

        return merge

    if name == "derive_requests":
        from .core.requests import derive_requests

        return derive_requests

    if name == "get_defaults":
        from .core.defaults import get_defaults

        return get_defaults

    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
