"""Routing — declaration trees flattened into an immutable pattern table.

Routes are declared as a tree, flattened once at startup, and every
reachable pattern gets a path builder and a parameter reader.
"""
