"""
API layer - FastAPI routes, dependencies, middleware and response models.
"""
