"""
Plan Advisor — FastAPI app factory.

Use: uvicorn server.app:app
Or:  from server import app
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .routes import register_routes
from .state import get_state


def create_app() -> FastAPI:
    """Build FastAPI app with CORS, routes, and startup."""
    app = FastAPI(
        title="Plan Advisor API",
        description="Offering compatibility, contextual ranking and opportunity-stage rules",
        version="1.0.0",
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_routes(app)

    @app.on_event("startup")
    def _startup_logging():
        state = get_state()
        config = state.config
        ok, errors = config.validate()
        for error in errors:
            print(f"[startup] WARNING: {error}")
        print("Plan Advisor API starting...")
        print(f"Catalog: {config.catalog_json_path} ({len(state.offering_rows())} offerings)")
        print(f"Scoring config: {config.scoring_config_path or 'defaults'}")
        print(f"Default policy: {state.scoring_config.default_policy}")
        print(f"[startup] Auto-load complete. Status: loaded={state.is_loaded}")

    return app


app = create_app()
