"""Root and health endpoints."""

from fastapi import APIRouter

from ..state import get_state

router = APIRouter()


@router.get("/")
def root():
    state = get_state()
    return {
        "name": "Plan Advisor API",
        "version": "1.0.0",
        "status": "loaded" if state.is_loaded else "not_configured",
        "current": {
            "offerings_count": len(state.offering_rows()),
            "sessions_count": len(state.sessions),
            "default_policy": state.scoring_config.default_policy,
        },
        "endpoints": {
            "offerings": ["/api/offerings", "/api/offerings/{id}", "/api/offerings/reload"],
            "sessions": [
                "/api/sessions/create",
                "/api/sessions/{id}/context",
                "/api/sessions/{id}/events",
                "/api/sessions/{id}/recommendations",
            ],
            "recommendations": ["/api/recommendations", "/api/recommendations/top"],
            "pipeline": ["/api/pipeline/validate-movement", "/api/pipeline/classify-message"],
        },
    }


@router.get("/api/health")
def health():
    state = get_state()
    return {
        "status": "healthy",
        "loaded": state.is_loaded,
        "catalog": {
            "available": state.is_loaded,
            "message": state.catalog_error or "ok",
        },
    }
