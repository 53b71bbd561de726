"""
Application package initializer.

The application is split into small layers so that each piece can be
replaced on its own: ``schemas`` describe the wire shapes, ``models``
the persisted entity, ``mappers`` translate between the two,
``repositories`` talk to the database, ``services`` hold the product
operations and ``api`` binds them to HTTP routes.
"""

from .main import app  # noqa: F401
