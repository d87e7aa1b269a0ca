from typing import Any, List, Optional, Union
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from fleet.domain import rules
from fleet.domain.entities.driver import DriverStatus


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class DriverIn(_CamelModel):
    """Driver payload for POST and PUT.

    Mirrors the UI form rules; digit fields are stored digits-only and the
    category list is stored comma-joined.
    """

    id: Optional[int] = None
    name: str
    cpf: str
    cnh_number: str
    cnh_category: Union[str, List[str]]
    phone: str
    status: DriverStatus = DriverStatus.active

    @field_validator("name")
    @classmethod
    def _name(cls, v: str) -> str:
        errors = rules.check_name(v)
        if errors:
            raise ValueError("; ".join(errors))
        return v

    @field_validator("cpf")
    @classmethod
    def _cpf(cls, v: str) -> str:
        errors = rules.check_cpf(v)
        if errors:
            raise ValueError(errors[0])
        return rules.only_digits(v)

    @field_validator("cnh_number")
    @classmethod
    def _cnh_number(cls, v: str) -> str:
        errors = rules.check_cnh_number(v)
        if errors:
            raise ValueError(errors[0])
        return rules.only_digits(v)

    @field_validator("phone")
    @classmethod
    def _phone(cls, v: str) -> str:
        errors = rules.check_phone(v)
        if errors:
            raise ValueError(errors[0])
        return rules.only_digits(v)

    @field_validator("cnh_category")
    @classmethod
    def _categories(cls, v: Union[str, List[str]]) -> str:
        codes = rules.split_categories(v)
        errors = rules.check_categories(codes)
        if errors:
            raise ValueError("; ".join(errors))
        return rules.join_categories(codes)

    def columns(self) -> dict[str, Any]:
        """Entity columns replaced by POST/PUT (never id or attachment columns)."""
        return {
            "name": self.name,
            "cpf": self.cpf,
            "cnh_number": self.cnh_number,
            "cnh_category": self.cnh_category,
            "phone": self.phone,
            "status": self.status.value,
        }


class DriverOut(_CamelModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    id: int
    name: str
    cpf: str
    cnh_number: str
    cnh_category: str
    phone: str
    status: str
    photo_filename: Optional[str] = Field(default=None)
    cnh_pdf_filename: Optional[str] = Field(default=None)
