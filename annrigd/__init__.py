"""Gamma cascade generators for Gd(n,gamma) and Ge/BGO event bookkeeping."""

__version__ = "0.1.0"