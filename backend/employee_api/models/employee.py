"""Employee models for the upstream employee API."""

from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

T = TypeVar("T")


class Employee(BaseModel):
    """Employee record as returned by the upstream API.

    Upstream payloads use ``employee_``-prefixed keys; plain names are accepted
    as well. Responses are serialized with the plain field names.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1)
    name: str | None = Field(default=None, validation_alias=AliasChoices("employee_name", "name"))
    salary: int | None = Field(default=None, ge=0, validation_alias=AliasChoices("employee_salary", "salary"))
    age: int | None = Field(default=None, validation_alias=AliasChoices("employee_age", "age"))
    title: str | None = Field(default=None, validation_alias=AliasChoices("employee_title", "title"))
    email: str | None = Field(default=None, validation_alias=AliasChoices("employee_email", "email"))


class EmployeeInput(BaseModel):
    """Fields accepted by the upstream API when creating an employee."""

    name: str | None = None
    salary: int | None = None
    age: int | None = None
    title: str | None = None


class Envelope(BaseModel, Generic[T]):
    """``{data, status}`` wrapper used by every upstream response."""

    data: T | None = None
    status: str | None = None
