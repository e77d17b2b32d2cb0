"""Minimal version helper for the radial_knobs package."""

from importlib import metadata

PACKAGE_NAME = "radial_knobs"
FALLBACK_VERSION = "0.0.0+unknown"


def get_version() -> str:
    """
    Get version of the installed distribution.

    :return: Version number, or a placeholder when running from a source tree.
    """
    try:
        return metadata.version(PACKAGE_NAME)
    except metadata.PackageNotFoundError:
        return FALLBACK_VERSION


__all__ = ["get_version"]
