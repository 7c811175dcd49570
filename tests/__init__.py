# tests/__init__.py
"""
Test suite for the IDP service.

- unit: routes and domain logic against the mock dataset, fake LLM
- integration: routes against an in-memory SQLite database
- factories: Factory Boy factories for the portal tables
"""
