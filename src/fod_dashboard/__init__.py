"""Fantasy-baseball league settings bridge, directory/roster API and dashboard views."""

__version__ = "0.1.0"
