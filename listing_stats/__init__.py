"""Classify property listings from a spreadsheet export and tally their statistics."""

__version__ = "0.1.0"
