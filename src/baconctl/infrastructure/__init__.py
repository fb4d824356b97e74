"""Infrastructure layer — graph store, BFS traversal, dataset ingestion.

This layer depends on stdlib, NetworkX, and the domain error types.
It must never import from services, commands, or output.
"""
