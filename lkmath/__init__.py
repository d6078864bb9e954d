"""Reusable mathematical tools: vectors, n-dimensional arrays, intervals, modular
arithmetic, permutations, small finite groups and graph exploration."""

__version__ = "0.5.0"