"""Containers, trees, traversals, linked lists and search."""
