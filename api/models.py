"""
Pydantic response models for the API.

Unknown measurements are serialized as ``null``; the HTML dashboard shows
them as "Unknown".  Field() descriptions and examples feed the OpenAPI docs.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from catalog.models import Aggregates, CelestialObject


# ── Catalogue records ─────────────────────────────────────────────────────────

class CelestialObjectOut(BaseModel):
    """A planet or dwarf planet from the normalized catalogue."""
    id: int = Field(..., ge=1, description="1-based position in the catalogue", examples=[3])
    name: str = Field(..., description="English display name", examples=["Earth"])
    category: str = Field(..., description="planet | dwarf-planet", examples=["planet"])
    distance_au: float | None = Field(None, description="Semi-major axis in AU (2 dp); null when unknown", examples=[1.0])
    diameter_km: float | None = Field(None, description="Mean diameter in km; null when unknown", examples=[12742.0])
    moon_count: int = Field(0, ge=0, description="Number of known moons", examples=[1])
    discovery_year: str = Field(..., description="Discovery date as published, or 'Prehistoric'", examples=["Prehistoric"])

    @classmethod
    def from_domain(cls, obj: CelestialObject) -> "CelestialObjectOut":
        return cls(**obj.to_dict())


class AggregatesOut(BaseModel):
    """Statistics over the full catalogue (independent of filters)."""
    count: int = Field(..., ge=0, description="Number of catalogue entries", examples=[15])
    average_diameter: float = Field(..., description="Mean diameter in km (2 dp); unknown diameters count as 0", examples=[27846.63])
    total_moons: int = Field(..., ge=0, description="Sum of moon counts", examples=[290])

    @classmethod
    def from_domain(cls, stats: Aggregates) -> "AggregatesOut":
        return cls(**stats.to_dict())


class BodiesResponse(BaseModel):
    """Response body for GET /api/v1/bodies."""
    query: str = Field(..., description="Search text as received", examples=["ear"])
    category: str = Field(..., description="Category filter applied", examples=["all"])
    total: int = Field(..., description="Number of visible objects", examples=[1])
    items: list[CelestialObjectOut] = Field(..., description="Visible objects in catalogue order")
    stats: AggregatesOut


# ── Dashboard ─────────────────────────────────────────────────────────────────

class DashboardSummary(BaseModel):
    """Response body for GET /api/v1/dashboard/summary."""
    status: str = Field(..., description="pending | loading | ready | error", examples=["ready"])
    stats: AggregatesOut
    loaded_at: datetime | None = Field(None, description="When the catalogue was fetched (UTC)")
    source_url: str | None = Field(None, description="Catalogue endpoint")
    error: str | None = Field(None, description="Fetch failure message when status is 'error'")


# ── Error model ───────────────────────────────────────────────────────────────

class ErrorResponse(BaseModel):
    """Standard error response body."""
    error: str = Field(..., description="Short error category", examples=["Bad request"])
    detail: str | None = Field(None, description="Extended error detail")
    status_code: int = Field(..., ge=400, le=599, description="HTTP status code", examples=[400])
