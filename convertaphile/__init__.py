"""Convertaphile - media format conversion service."""

__version__ = "0.1.0"
