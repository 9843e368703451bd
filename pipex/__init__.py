"""Run two commands joined by a pipe, with input and output redirected to files."""

__version__ = "0.1.0"