"""Catalog endpoints."""

from typing import Optional

from fastapi import APIRouter, HTTPException, Query

from ..models import OfferingListResponse
from ..state import get_state
from ..utils import MAX_PAGE_SIZE, clamp_limit

router = APIRouter()


def _require_catalog(state):
    if not state.is_loaded:
        raise HTTPException(
            status_code=400,
            detail=f"No catalog loaded: {state.catalog_error or 'unknown error'}",
        )
    return state.catalog


@router.get("", response_model=OfferingListResponse)
def list_offerings(
    limit: Optional[int] = Query(None, ge=1, le=MAX_PAGE_SIZE),
    offset: int = Query(0, ge=0),
    active_only: bool = False,
):
    """List catalog rows as stored (storefront keys)."""
    state = get_state()
    catalog = _require_catalog(state)
    limit = clamp_limit(limit, default=state.config.default_page_size)
    total = len(catalog.get_offerings(active_only=active_only))
    rows = catalog.get_offerings(limit=limit, offset=offset, active_only=active_only)
    return OfferingListResponse(offerings=rows, total=total, offset=offset, limit=limit)


@router.post("/reload")
def reload_offerings():
    """Re-read the catalog source."""
    state = get_state()
    catalog = _require_catalog(state)
    try:
        count = catalog.reload()
    except (FileNotFoundError, TypeError, ValueError) as e:
        raise HTTPException(status_code=500, detail=f"Catalog reload failed: {e}")
    print(f"[offerings] Catalog reloaded: {count} offerings", flush=True)
    return {"status": "reloaded", "offerings_count": count}


@router.get("/{offering_id}")
def get_offering(offering_id: str):
    state = get_state()
    row = _require_catalog(state).get_offering(offering_id)
    if row is None:
        raise HTTPException(status_code=404, detail=f"Offering not found: {offering_id}")
    return row
