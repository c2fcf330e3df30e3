"""Run two commands joined by a pipe between an input and an output file,
with the string, character, formatting and line-reading helpers it uses."""

__version__ = "0.1.0"