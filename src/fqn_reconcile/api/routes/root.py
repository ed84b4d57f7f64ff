from __future__ import annotations

from typing import Any

from fastapi import APIRouter

router = APIRouter()


@router.get("/")
async def root() -> dict[str, Any]:
    """Root discovery endpoint."""
    return {
        "meta": {
            "title": "fqn-reconcile API",
            "description": "Check and fix PHP namespaces and class names against their file paths.",
            "version": "0.1.0",
        },
        "links": {
            "self": "/",
            "reconcile": "/reconcile",
            "inspect": "/inspect",
            "health": "/health",
            "openapi": "/openapi.json",
            "docs": "/docs",
        },
    }
