"""Console front end for human players."""

from .interactive import InteractiveHuman, LogPrinter

__all__ = ["InteractiveHuman", "LogPrinter"]
