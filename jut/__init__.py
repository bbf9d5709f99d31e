"""jut - JWT decoder for your terminal"""
from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("jut")
except PackageNotFoundError:
    # Running from a source checkout
    __version__ = "dev"

__all__ = ["__version__"]
