"""
PassCheck: password check service.

Application package root. This is a small service using hexagonal
architecture (ports & adapters).

Bounded contexts:
    - password: Request validation, strength policy, common-password check.

Layers:
    - domain: Ports (ABCs), policy value object, errors.
    - application: Use cases.
    - infrastructure: Adapters implementing domain ports.
    - interfaces: Request adapters, FastAPI routers, Pydantic schemas.
    - shared: Cross-cutting concerns (errors, security, logging).
"""
