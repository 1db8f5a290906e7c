"""Paginated record listing."""

from __future__ import annotations

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from gpstelemetry.models.record import TelemetryRecord


class PageMeta(BaseModel):
    """Pagination metadata; every field is optional since unpaginated listings send ``{}``."""

    model_config = ConfigDict(frozen=True)

    total_items: int | None = Field(
        default=None, validation_alias=AliasChoices("total_items", "totalItems"),
    )
    item_count: int | None = Field(
        default=None, validation_alias=AliasChoices("item_count", "itemCount"),
    )
    items_per_page: int | None = Field(
        default=None, validation_alias=AliasChoices("items_per_page", "itemsPerPage"),
    )
    total_pages: int | None = Field(
        default=None, validation_alias=AliasChoices("total_pages", "totalPages"),
    )
    current_page: int | None = Field(
        default=None, validation_alias=AliasChoices("current_page", "currentPage"),
    )


class RecordPage(BaseModel):
    """A page of telemetry records plus its metadata."""

    model_config = ConfigDict(frozen=True)

    data: list[TelemetryRecord] = Field(default_factory=list)
    meta: PageMeta = Field(default_factory=PageMeta)
