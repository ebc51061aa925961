"""Response bodies shared by several routers."""

from pydantic import BaseModel


class SuccessResponse(BaseModel):
    """Acknowledges a mutation that returns no resource, with the status message."""

    success: bool
    message: str
