"""
Pydantic models for the profile wizard.

Field names are camelCase because they are stored and served as-is.
"""

from pydantic import BaseModel, Field, field_validator


class ProfileForm(BaseModel):
    """PUT /api/profile - the full wizard form."""
    fullName: str = Field("", max_length=100)
    nickname: str = Field("", max_length=100)
    countryId: str = Field("", max_length=32)
    countryName: str = Field("", max_length=100)
    countryCode: str = Field("", max_length=32)
    admin1Id: str = Field("", max_length=32)
    admin1Name: str = Field("", max_length=100)
    admin1Code: str = Field("", max_length=32)
    cityId: str = Field("", max_length=32)
    cityName: str = Field("", max_length=100)
    postalCode: str = Field("", max_length=20)
    addressDetail: str = Field("", max_length=500)
    birthDate: str = Field("", max_length=10, description="YYYY-MM-DD")
    gender: str = Field("", max_length=32)

    @field_validator("*", mode="before")
    @classmethod
    def _strip(cls, value):
        if value is None:
            return ""
        if isinstance(value, str):
            return value.strip()
        return value
