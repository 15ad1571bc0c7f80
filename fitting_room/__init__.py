"""Fitting Room: virtual try-on proxy and client."""

__version__ = "1.0.0"
