"""Tiles Web - composite page views for FastAPI"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("tiles-web")
except PackageNotFoundError:
    __version__ = "dev"
