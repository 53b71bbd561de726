"""
API package containing the HTTP routes.

``router`` aggregates the domain routers and is mounted by the app
factory under the ``/api`` prefix.
"""
