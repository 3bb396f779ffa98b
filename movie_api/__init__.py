"""
Movie API — Application Package Initializer
============================================

What: Marks the `movie_api` directory as a Python package.
Who:  Used by uvicorn (`movie_api.main:app`), pytest, and `python -m movie_api`.

Architecture Note:
    The service follows the same layered split throughout:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │       Services (Movie Store)        │  ← In-memory collection + rules
    ├─────────────────────────────────────┤
    │           Schemas (Data)            │  ← Pydantic records and payloads
    └─────────────────────────────────────┘

    Routes receive the store through FastAPI dependency injection, so each
    application instance (and each test) works against its own collection.
"""

__version__ = "1.0.0"
