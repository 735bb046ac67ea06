"""API Layer: FastAPI routes, middleware and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Successful responses carry an empty body; failures a JSON error envelope

Design Decisions:
    - Thin routes delegate to services
"""
