from __future__ import annotations

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Credentials(BaseModel):
    email: str
    password: str


class Category(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: int | str
    name: str
    creation_date: datetime | None = Field(default=None, alias="creationDate")


class CategoryPage(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    data: list[Category] = Field(default_factory=list)
    total_number_of_pages: int = Field(default=1, alias="totalNumberOfPages")

    @field_validator("data", mode="before")
    @classmethod
    def _empty_when_null(cls, v):
        return v or []

    @field_validator("total_number_of_pages", mode="before")
    @classmethod
    def _at_least_one_page(cls, v):
        # missing, null and 0 all mean a single (possibly empty) page
        return v or 1


def format_creation_date(value: date | None) -> str:
    if value is None:
        return ""
    return f"{value.month}/{value.day}/{value.year}"
