"""
Application layer.

Service orchestrators sitting between the HTTP boundary and the core pipeline.
"""
