"""Service layer — the query engine and the ServiceResult-returning facade.

Services may import from domain and infrastructure layers.
They must never import from commands or output.
"""
