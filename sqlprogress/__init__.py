"""Numbered SQL querying lessons checked across ORM, SQL text and data frames."""

__version__ = "0.1.0"