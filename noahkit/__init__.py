"""Path, command-line, Rythp script, archive listing, association and installer helpers."""

__version__ = "0.1.0"
__all__ = ["arcinfo", "arcview", "assoc", "cmdline", "installer", "paths", "rythp"]