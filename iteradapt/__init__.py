"""Lazy iterator adaptors and sources: merging, peeking, permutations, tuples, zipping and more."""

__version__ = "0.1.0"