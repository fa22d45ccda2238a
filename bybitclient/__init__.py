"""Synchronous client and command line tool for public Bybit v5 REST endpoints."""

__version__ = "0.1.0"