"""gosprout: scaffolding tool for Go projects."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("gosprout")
except PackageNotFoundError:
    __version__ = "0.0.0"
