"""
ForexDesk: support services for the forex trading platform.

Application package root. This is a modular monolith using
hexagonal architecture (ports & adapters).

Bounded contexts:
    - uploads: Media storage for profile images and payment proofs.
    - notifications: Outbound email (mocked for development).
    - trading: Client-side order validation.
    - ui: View lifecycle utilities (scroll restoration).

Layers:
    - domain: Pure business logic, entities, ports (ABCs), errors.
    - application: Use cases and orchestration.
    - infrastructure: Adapters (Cloudinary, HTTP, asyncio) implementing domain ports.
    - interfaces: FastAPI routers, upload dependencies, CLI probes.
    - shared: Cross-cutting concerns (errors, security, logging).
    - testing: Assertion extensions and test doubles for the test suite.
"""
