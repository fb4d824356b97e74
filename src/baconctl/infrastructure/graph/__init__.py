"""Labeled graph container and the shortest-path algorithms built on it."""
