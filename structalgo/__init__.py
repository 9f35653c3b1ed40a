"""Polynomials, elector lists, a word index tree, numerics and console programs."""

__version__ = "0.1.0"