"""Sorting algorithms run over simulated workers, with a command and a JSON timing log."""

__version__ = "0.1.0"