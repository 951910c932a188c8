# =============================================================================
# API Request Models — Pydantic V2 Schemas
# =============================================================================
#
# These models define the shape of data coming INTO the API. JSON keys are
# camelCase (firstName, yearsOfExperience, ...) and map onto snake_case
# attributes, which match the ORM column names one-to-one.
#
# Field rules follow the directory's create form:
#   - names, city, specialties: letters, spaces, apostrophes, hyphens
#   - degree: up to 4 letters/dots (e.g. "MD", "Ph.D")
#   - phone: ten US digits in one of the common written formats
# =============================================================================

import re
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

NAME_PATTERN = r"^[\p{L}\s'-]+$"
DEGREE_PATTERN = r"^[\p{L}\s'.]+$"

# 1234567890, (123) 456-7890, 123-456-7890, 123.456.7890
_PHONE_FORMAT = re.compile(r"^(\d{10}|\(?[0-9]{3}\)?[-. ]?[0-9]{3}[-. ]?[0-9]{4})$")

# US numbering plan: area code and exchange never start with 0 or 1
_US_MOBILE = re.compile(r"^[2-9]\d{2}[2-9]\d{6}$")

Specialty = Annotated[
    str,
    Field(min_length=1, max_length=255, pattern=NAME_PATTERN),
]


class AdvocateCreate(BaseModel):
    """
    Request body for POST /seed — one advocate to add to the directory.

    Example:
        {
            "firstName": "Emily",
            "lastName": "Davis",
            "city": "Portland",
            "degree": "PhD",
            "specialties": ["Depression", "Trauma"],
            "yearsOfExperience": 10,
            "phoneNumber": "(345) 678-9012"
        }
    """

    first_name: str = Field(..., min_length=1, max_length=128, pattern=NAME_PATTERN)
    last_name: str = Field(..., min_length=1, max_length=128, pattern=NAME_PATTERN)
    city: str = Field(..., min_length=1, max_length=255, pattern=NAME_PATTERN)
    degree: str = Field(..., min_length=1, max_length=4, pattern=DEGREE_PATTERN)
    specialties: list[Specialty] = Field(..., min_length=1)
    years_of_experience: int = Field(..., ge=1, le=100)
    phone_number: int = Field(
        ...,
        description="Ten-digit US mobile number; common separators accepted",
    )

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "examples": [
                {
                    "firstName": "Emily",
                    "lastName": "Davis",
                    "city": "Portland",
                    "degree": "PhD",
                    "specialties": ["Depression", "Trauma"],
                    "yearsOfExperience": 10,
                    "phoneNumber": "(345) 678-9012",
                }
            ]
        },
    )

    @field_validator("phone_number", mode="before")
    @classmethod
    def normalize_phone_number(cls, value: object) -> int:
        phone = str(value) if value is not None else ""
        if not _PHONE_FORMAT.match(phone):
            raise ValueError(
                "phone number must look like 1234567890, (123) 456-7890, "
                "123-456-7890 or 123.456.7890",
            )
        digits = re.sub(r"\D", "", phone)
        if not _US_MOBILE.match(digits):
            raise ValueError("phone number is not a valid US mobile number")
        return int(digits)
