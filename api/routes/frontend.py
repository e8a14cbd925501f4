"""
Frontend HTML routes.

Serves the Jinja2 dashboard page and its HTMX results partial.

Routes:
    GET /                  → index.html (stat cards, search box, type filter, table)
    GET /partials/results  → partials/results.html (HTMX swap target)

Each request recomputes the visible subset from the canonical dataset; the
page holds no filter state between requests.
"""

from typing import Any

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from api.dependencies import get_store
from catalog.models import CategoryFilter
from catalog.store import CatalogStore
from catalog.view_filter import filter_and_aggregate

router = APIRouter(tags=["frontend"])

# Templates instance is set by create_app() after mounting.
_templates: Jinja2Templates | None = None

CATEGORY_OPTIONS = [
    (CategoryFilter.ALL.value, "All Types"),
    (CategoryFilter.PLANET.value, "Planets"),
    (CategoryFilter.DWARF_PLANET.value, "Dwarf Planets"),
]


def set_templates(t: Jinja2Templates) -> None:
    global _templates
    _templates = t


def _tmpl() -> Jinja2Templates:
    if _templates is None:
        raise RuntimeError("Templates not initialised — call set_templates() first")
    return _templates


def _parse_filters(request: Request) -> dict[str, Any]:
    """Extract view-state params from the query string.

    Raises:
        ValueError: unrecognised category (rendered as a 400 by the app).
    """
    params = request.query_params
    return {
        "q":        params.get("q", ""),
        "category": CategoryFilter(params.get("category", CategoryFilter.ALL.value)),
    }


def _view_context(filters: dict[str, Any], store: CatalogStore) -> dict[str, Any]:
    """Template context for the current catalogue state and filters."""
    snap = store.snapshot()
    result = filter_and_aggregate(snap.dataset, filters["q"], filters["category"])
    return {
        "status":  snap.status.value,
        "error":   snap.error,
        "items":   result.visible,
        "total":   len(result.visible),
        "stats":   result.stats,
    }


# ── Routes ────────────────────────────────────────────────────────────────────

@router.get("/", response_class=HTMLResponse, include_in_schema=False)
def index(request: Request, store: CatalogStore = Depends(get_store)) -> HTMLResponse:
    """Dashboard page."""
    filters = _parse_filters(request)
    context = _view_context(filters, store)

    return _tmpl().TemplateResponse(
        request,
        "index.html",
        {
            "filters":          filters,
            "category_options": CATEGORY_OPTIONS,
            **context,
        },
    )


@router.get("/partials/results", response_class=HTMLResponse, include_in_schema=False)
def results_partial(request: Request, store: CatalogStore = Depends(get_store)) -> HTMLResponse:
    """HTMX partial: results heading and table for the current filters."""
    filters = _parse_filters(request)
    context = _view_context(filters, store)

    return _tmpl().TemplateResponse(
        request,
        "partials/results.html",
        {"filters": filters, **context},
    )
