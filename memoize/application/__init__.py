"""
Application layer.

The application layer orchestrates domain objects on top of storage
ports. It contains the deck and card services, the index maintainer
and the deck deletion cascade.

This layer contains:
- Services: owner-scoped operations returning Success or Failure
- Protocols: ports implemented by the infrastructure layer
- DTOs: typed field bundles for create and update calls
"""
