"""Package metadata lookup."""

from importlib.metadata import PackageNotFoundError, version

import termresume

DISTRIBUTION_NAME = "termresume"


def get_version() -> str:
    """Return the installed distribution version, or the source tree version when not installed."""
    try:
        return version(DISTRIBUTION_NAME)
    except PackageNotFoundError:
        return termresume.__version__
