"""
Pydantic models for customers
"""
import re
from pydantic import BaseModel, ConfigDict, Field, field_validator

LICENSE_NUMBER_PATTERN = re.compile(r'^\d{6}-\d{2}-\d{4}$')


class Customer(BaseModel):
    """Customer account as seen by reports"""
    model_config = ConfigDict(frozen=True)

    username: str = Field(default="", max_length=100, description="Login name")
    full_name: str = Field(..., max_length=200, description="Customer full name")
    contact_number: str = Field(default="", max_length=50)
    email: str = Field(default="", max_length=200)
    address: str = Field(default="")
    date_of_birth: str = Field(default="")
    license_number: str = Field(default="", description="Driving licence, 000000-00-0000")
    emergency_contact: str = Field(default="")

    @field_validator('full_name')
    @classmethod
    def validate_full_name(cls, v: str) -> str:
        """Name must not be blank"""
        v = v.strip()
        if not v:
            raise ValueError("Customer name must not be empty")
        return v

    @field_validator('license_number')
    @classmethod
    def validate_license_number(cls, v: str) -> str:
        """Licence number is optional but must follow the national format when given"""
        v = v.strip()
        if v and not LICENSE_NUMBER_PATTERN.match(v):
            raise ValueError("License number must look like 000000-00-0000")
        return v

    @property
    def name(self) -> str:
        return self.full_name
