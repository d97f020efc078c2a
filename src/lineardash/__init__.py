"""Linear Tasks Dashboard - server-rendered view of your assigned Linear issues."""

__version__ = "0.1.0"


def get_version() -> str:
    """Return the package version."""
    return __version__
