from __future__ import annotations

from fastapi import FastAPI

from prop_konverter.api.routes.convert import router as convert_router
from prop_konverter.api.routes.health import router as health_router


def create_app() -> FastAPI:
    app = FastAPI(
        title="Prop Konverter API",
        description="Rewrite object-style defineProps() into typed, destructured declarations.",
        version="0.1.0",
    )

    app.include_router(health_router, include_in_schema=False)
    app.include_router(convert_router)

    return app
