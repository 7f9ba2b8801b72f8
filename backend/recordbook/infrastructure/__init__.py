"""Infrastructure Layer: external service clients and cross-cutting concerns.

Invariants:
    - Infrastructure never imports services/ or api/
    - Every store failure leaves this layer as GatewayError (code + message)
    - Every text-generation failure leaves this layer as TextGenerationError

Design Decisions:
    - Thin wrappers over raw clients: error mapping lives here, classification
      lives in core/classify_errors
"""
