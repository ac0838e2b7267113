"""Installed version of infixcalc."""

from importlib.metadata import PackageNotFoundError, version


def get_version() -> str:
    try:
        return version("infixcalc")
    except PackageNotFoundError:
        return "0.0.0+local"
