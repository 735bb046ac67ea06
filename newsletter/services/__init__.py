"""Services Layer: imperative shell around the pure core.

Invariants:
    - Services receive their IO capabilities as arguments (no module-level singletons)
"""
