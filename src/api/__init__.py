"""
API layer - Request/response models for Task Bank.

This layer contains:
- Pydantic request/response models
- Adapters between API models and application DTOs

IMPORT RULES:
- CAN import from: application, domain
- CANNOT import from: infrastructure directly
"""

__all__: list[str] = []
