"""Employee models for the upstream employee store."""

from __future__ import annotations

from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class Employee(BaseModel):
    """Employee record as returned by the upstream store.

    The upstream prefixes its fields with ``employee_``; both spellings are
    accepted, the plain names are what this API serializes.
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    id: str
    name: str | None = Field(default=None, validation_alias=AliasChoices("employee_name", "name"))
    salary: int | None = Field(default=None, ge=0, validation_alias=AliasChoices("employee_salary", "salary"))
    age: int | None = Field(default=None, validation_alias=AliasChoices("employee_age", "age"))
    title: str | None = Field(default=None, validation_alias=AliasChoices("employee_title", "title"))
    email: str | None = Field(default=None, validation_alias=AliasChoices("employee_email", "email"))


class EmployeeInput(BaseModel):
    """Payload for creating an employee."""

    name: str = Field(min_length=1)
    salary: int = Field(ge=0)
    age: int | None = Field(default=None, ge=16, le=75)
    title: str | None = None

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("name must not be blank")
        return value

    @field_validator("title")
    @classmethod
    def _title_not_blank(cls, value: str | None) -> str | None:
        if value is not None and not value.strip():
            raise ValueError("title must not be blank")
        return value


class DeleteEmployeeInput(BaseModel):
    name: str


class UpstreamResponse(BaseModel):
    """Envelope wrapping every upstream reply: ``{"data": ..., "status": ...}``."""

    data: Any = None
    status: Any = None
    error: Any = None
