"""Weather Lookup API App"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("weather-lookup")
except PackageNotFoundError:
    __version__ = "dev"
