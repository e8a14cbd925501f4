"""Catalogue endpoints: filtered body listing and single-body lookup."""

from fastapi import APIRouter, Depends, HTTPException, Query

from api.dependencies import get_store
from api.models import AggregatesOut, BodiesResponse, CelestialObjectOut, ErrorResponse
from catalog.models import CategoryFilter
from catalog.store import CatalogStore

router = APIRouter(prefix="/bodies", tags=["bodies"])

_UNAVAILABLE = {503: {"model": ErrorResponse, "description": "Catalogue not loaded"}}


@router.get("", response_model=BodiesResponse, summary="List catalogue bodies",
            responses=_UNAVAILABLE)
def list_bodies(
    q: str = Query("", description="Case-insensitive substring of the name"),
    category: CategoryFilter = Query(CategoryFilter.ALL, description="all | planet | dwarf-planet"),
    store: CatalogStore = Depends(get_store),
) -> BodiesResponse:
    """Return the visible subset for the given criteria.

    ``stats`` always describes the full catalogue, whatever the filters.
    """
    result = store.view(q, category)
    return BodiesResponse(
        query=q,
        category=category.value,
        total=len(result.visible),
        items=[CelestialObjectOut.from_domain(obj) for obj in result.visible],
        stats=AggregatesOut.from_domain(result.stats),
    )


@router.get("/{body_id}", response_model=CelestialObjectOut, summary="Get one body",
            responses={404: {"model": ErrorResponse}, **_UNAVAILABLE})
def get_body(body_id: int, store: CatalogStore = Depends(get_store)) -> CelestialObjectOut:
    obj = store.get(body_id)
    if obj is None:
        raise HTTPException(status_code=404, detail=f"Body {body_id} not found")
    return CelestialObjectOut.from_domain(obj)
