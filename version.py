import os

CURRENT_VERSION = "0.1.0"


def get_version():
    """Return the package version, optionally overridden by PACKAGE_VERSION."""
    if "PACKAGE_VERSION" in os.environ:
        return os.environ.get("PACKAGE_VERSION")
    return CURRENT_VERSION


__version__ = get_version()
