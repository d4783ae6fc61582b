"""Net-JSON: codec and data model for JSON netlists written by synthesis tools"""

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("netjson")
except (ImportError, PackageNotFoundError):
    __version__ = "0.0.0"
