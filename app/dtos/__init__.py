"""Data Transfer Objects (DTOs) layer.

DTOs decouple the wire format from the database models.

Structure:
- request/: carriers and validation rules for incoming payloads
- response/: allow-list projections and envelopes for outgoing payloads
- factory.py: dispatch by operation name
"""

from app.dtos.factory import DtoFactory, RequestType, ResponseType, UnknownDtoTypeError

__all__ = [
    "DtoFactory",
    "RequestType",
    "ResponseType",
    "UnknownDtoTypeError",
]
