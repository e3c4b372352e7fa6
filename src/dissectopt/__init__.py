"""dissectopt package root."""

from dissectopt.exceptions import DissectOptionError, NeverRaise, NeverThrown
from dissectopt.invariants import never

__all__ = ["__version__", "DissectOptionError", "NeverRaise", "NeverThrown", "never"]

__version__ = "0.1.0"
