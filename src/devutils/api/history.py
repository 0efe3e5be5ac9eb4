"""FastAPI history endpoints, one ledger per tool.

GET    /v1/history/{tool}                       - list entries, newest first
GET    /v1/history/{tool}/{entry_id}/restore    - stored input for an entry
DELETE /v1/history/{tool}/{entry_id}            - delete one entry
DELETE /v1/history/{tool}                       - clear the ledger
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Response

from devutils.api.dependencies import HistoryTool, get_history_ledger
from devutils.history.ledger import HistoryLedger
from devutils.models.history import HistoryEntry, RestoreResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/v1/history", tags=["history"])


@router.get("/{tool}", response_model=list[HistoryEntry])
async def list_history(
    tool: HistoryTool,
    ledger: HistoryLedger = Depends(get_history_ledger),
) -> list[HistoryEntry]:
    return ledger.entries()


@router.get("/{tool}/{entry_id}/restore", response_model=RestoreResponse)
async def restore_history_entry(
    tool: HistoryTool,
    entry_id: str,
    ledger: HistoryLedger = Depends(get_history_ledger),
) -> RestoreResponse:
    entry = ledger.get(entry_id)
    if entry is None:
        raise HTTPException(status_code=404, detail="History entry not found.")
    return RestoreResponse(input_text=ledger.restore(entry))


@router.delete("/{tool}/{entry_id}", status_code=204)
async def delete_history_entry(
    tool: HistoryTool,
    entry_id: str,
    ledger: HistoryLedger = Depends(get_history_ledger),
) -> Response:
    if not ledger.remove(entry_id):
        raise HTTPException(status_code=404, detail="History entry not found.")
    return Response(status_code=204)


@router.delete("/{tool}", status_code=204)
async def clear_history(
    tool: HistoryTool,
    ledger: HistoryLedger = Depends(get_history_ledger),
) -> Response:
    ledger.clear()
    logger.info("Cleared %s history", tool.value)
    return Response(status_code=204)
