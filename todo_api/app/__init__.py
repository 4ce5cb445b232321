"""
Application package initializer.

The package is organised the usual way for a small FastAPI service:
``core`` holds configuration, logging and seed loading, ``schemas``
the pydantic models, ``services`` the todo store and ``api`` the
versioned routers.
"""
