"""
Service layer.

Business logic lives here so the API handlers only translate between
HTTP and the services.
"""
