"""aifile — make sure a project carries its AI helper stub."""

__version__ = "0.1.0"
