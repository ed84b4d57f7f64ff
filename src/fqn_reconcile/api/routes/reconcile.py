from fastapi import APIRouter, Depends, HTTPException

from fqn_reconcile.api.dependencies import get_reconciler
from fqn_reconcile.api.schemas import InspectResponse, ReconcileResponse, SourceRequest
from fqn_reconcile.core.errors import LocationKindError, ResolutionError
from fqn_reconcile.core.reconciler import IdentityReconciler

router = APIRouter(tags=["reconcile"])


@router.post("/reconcile", response_model=ReconcileResponse)
def reconcile(
    body: SourceRequest,
    reconciler: IdentityReconciler = Depends(get_reconciler),
) -> ReconcileResponse:
    """Return the edits that make the source match its path, and the patched text."""
    unit = body.to_unit()
    try:
        edits = reconciler.reconcile(unit)
    except LocationKindError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except ResolutionError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    return ReconcileResponse(edits=list(edits.edits), text=edits.apply_to(unit.text))


@router.post("/inspect", response_model=InspectResponse)
def inspect(
    body: SourceRequest,
    reconciler: IdentityReconciler = Depends(get_reconciler),
) -> InspectResponse:
    """Report namespace and class name mismatches; never fails on unknown locations."""
    return InspectResponse(diagnostics=reconciler.inspect(body.to_unit()))
