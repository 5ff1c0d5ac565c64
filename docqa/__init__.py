"""
docqa: grounded question answering over a private document collection.

Retrieval-augmented pipeline (chunk, embed, index, retrieve, generate)
plus an intent-routing task agent.
"""

__version__ = "0.1.0"
