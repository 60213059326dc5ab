"""
Hex dump utility: offset, grouped hex columns and printable ASCII.
"""

from .data_models import __version__, DumpConfig, Line
from .dumper import Dumper
from .formatter import format_line

__all__ = ['__version__', 'DumpConfig', 'Line', 'Dumper', 'format_line']
