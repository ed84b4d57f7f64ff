from __future__ import annotations

from fastapi import FastAPI

from fqn_reconcile.api.lifespan import lifespan
from fqn_reconcile.api.routes.health import router as health_router
from fqn_reconcile.api.routes.reconcile import router as reconcile_router
from fqn_reconcile.api.routes.root import router as root_router


def create_app() -> FastAPI:
    app = FastAPI(
        title="fqn-reconcile API",
        description="Check and fix PHP namespaces and class names against their file paths.",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.include_router(root_router, include_in_schema=False)
    app.include_router(health_router, include_in_schema=False)
    app.include_router(reconcile_router)

    return app
