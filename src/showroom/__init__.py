"""Showroom - server-rendered dealer pages."""

__version__ = "0.1.0"
