"""
Pydantic schema definitions for API payloads.

Schemas describe request and response bodies and are independent of
how the store keeps its records.
"""
