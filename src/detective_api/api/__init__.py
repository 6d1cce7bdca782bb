"""
detective_api.api

HTTP layer for the Detective Case API.

Responsibilities:
- FastAPI app factory, resource routers and dependency wiring.
- Request/response models and error rendering.
"""

# Package marker.
