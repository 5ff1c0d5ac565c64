"""
Core domain layer.

Retrieval-augmented pipeline (chunking, embedding, vector indexing,
retrieval, grounded generation) and the intent-routing agent.
"""
