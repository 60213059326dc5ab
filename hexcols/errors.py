"""
Exceptions raised while parsing arguments and dumping input.
"""


class HexdumpError(Exception):
    """Base class for every error that aborts a dump."""


class UsageError(HexdumpError):
    """Invalid command-line arguments."""


class ConfigError(UsageError, ValueError):
    """A configuration value outside its allowed range."""


class OpenError(HexdumpError):
    """The input file could not be opened."""


class SeekError(HexdumpError):
    """The input could not be positioned at the requested offset."""


class ReadError(HexdumpError):
    """Reading the input failed before end of stream."""
