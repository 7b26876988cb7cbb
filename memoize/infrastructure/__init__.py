"""
Infrastructure layer.

Implementations of the ports defined in the application layer, and
everything facing the outside world:

- Record stores (SQLAlchemy table, in-process dictionary)
- Web framework (FastAPI routers, schemas, dependencies)
- Identity provider (Google userinfo over httpx)
"""
