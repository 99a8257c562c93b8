"""
Pydantic schema definitions for API payloads.

Schemas describe the JSON bodies accepted and returned by the HTTP
layer.  The service layer stores the same ``Record`` model it
receives.
"""
