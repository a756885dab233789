"""Toolchain resolution: find the tools a build needs and remember them."""

__version__ = "0.3.0"
