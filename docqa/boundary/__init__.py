"""
Boundary layer.

Adapters for external collaborators: embedding service, vector store,
language model, and the SQL-backed counter and query log.
"""
