"""Services Layer: the imperative shell around the pure core.

Invariants:
    - Services own IO orchestration (gateway, text generation); rules stay in core/
    - Services receive collaborators through their constructors
"""
