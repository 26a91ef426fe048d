"""
Semantic search pipeline - embed images or text, store them in pgvector,
and retrieve nearest neighbors by cosine similarity.
"""

__version__ = "0.1.0"
