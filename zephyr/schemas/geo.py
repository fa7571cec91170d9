"""
Pydantic models for the geo lookups backing the profile wizard.
"""

from typing import List, Optional
from pydantic import BaseModel, Field


class GeoOption(BaseModel):
    """One selectable country, region or city."""
    id: str
    name: str
    code: Optional[str] = None


class PostalPlace(BaseModel):
    """A place a postal code resolves to."""
    name: str
    region: Optional[str] = None


class PostalValidation(BaseModel):
    """Advisory result of a postal code lookup. Never blocks a save."""
    valid: bool
    message: Optional[str] = None
    places: List[PostalPlace] = Field(default_factory=list)
