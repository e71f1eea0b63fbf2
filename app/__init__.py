"""
Employee Management: CRUD service for employee records.

Application package root, laid out as hexagonal architecture
(ports & adapters).

Bounded contexts:
    - employees: Create, read, list, update and delete employee records.

Layers:
    - domain: Entities, validation rules, ports (ABCs), errors.
    - application: Use cases, DTOs, orchestration.
    - infrastructure: Adapters (SQLAlchemy, in-memory) implementing domain ports.
    - interfaces: FastAPI routers, Pydantic schemas, dependency wiring.
    - shared: Cross-cutting concerns (errors, security, logging).
"""
