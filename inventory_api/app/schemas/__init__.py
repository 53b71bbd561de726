"""
Pydantic schema definitions for API payloads.

Schemas are separated from the persisted entities to decouple the API
representation from storage.  Request shapes never carry an ``id``;
the identifier always comes from the URL.
"""
