"""
detective_api.db

Persistence package (SQLAlchemy async).

Responsibilities:
- Provide ORM models, engine/session setup, the persistence gateway and repositories.
"""

# Package marker.
