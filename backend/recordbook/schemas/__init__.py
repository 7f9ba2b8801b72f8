"""API Schemas: pydantic models for entities, payloads and engine state.

Invariants:
    - Schemas describe shapes only; business rules live in core/
"""
