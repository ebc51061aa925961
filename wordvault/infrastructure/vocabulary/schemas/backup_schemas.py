"""Pydantic schemas for backup linking and import."""

from pydantic import BaseModel, Field


class BackupLinkRequest(BaseModel):
    """Schema for linking the backup file."""

    path: str = Field(..., min_length=1, description="Path of the JSON backup file")


class BackupLinkResponse(BaseModel):
    """Result of linking, including the outcome of the first write."""

    path: str
    outcome: str
    message: str


class ImportResponse(BaseModel):
    """Schema for import results."""

    inserted: int = Field(..., description="Number of new words added")
    message: str
