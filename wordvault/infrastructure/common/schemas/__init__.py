"""Common infrastructure schemas."""

from wordvault.infrastructure.common.schemas.response_wrappers import SuccessResponse

__all__ = [
    "SuccessResponse",
]
