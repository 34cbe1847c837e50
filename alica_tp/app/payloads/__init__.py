from .models import (
    InvalidPayloadError,
    InvalidTimestampError,
    PayloadError,
    TransactionPayload,
)
from .format import PayloadFormat
from .pipe_separated import PipeSeparatedFormat

__all__ = [
    "InvalidPayloadError",
    "InvalidTimestampError",
    "PayloadError",
    "TransactionPayload",
    "PayloadFormat",
    "PipeSeparatedFormat",
]
