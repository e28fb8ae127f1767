"""Mockery - Google Mock generator for C++ interfaces."""

__version__ = "0.1.0"
