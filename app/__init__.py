"""
Items API: in-memory record service.

Application package root. A small modular monolith using
hexagonal architecture (ports & adapters).

Bounded contexts:
    - items: create/read/update/delete over an in-memory record store.

Layers:
    - domain: Entities, outcomes, the record store port, errors.
    - application: Use cases, DTOs, orchestration.
    - infrastructure: The in-memory record store adapter.
    - interfaces: FastAPI routers, Pydantic schemas.
    - shared: Cross-cutting concerns (error normalization, security, logging).
"""
