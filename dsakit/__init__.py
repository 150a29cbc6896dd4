"""Recursion, backtracking and binary tree algorithms, with a tree-reading command."""

__version__ = "0.1.0"