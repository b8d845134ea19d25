# statement_recon/routers/reconcile.py

"""
Reconciliation routes.

Upload the internal ledger and the provider statement as CSV, get the
classified result back or download one category as CSV.
"""

import logging
from datetime import datetime
from fastapi import APIRouter, Depends, File, HTTPException, UploadFile
from fastapi.responses import Response
from pydantic import BaseModel
from typing import Optional

from statement_recon.config import Settings, get_settings
from statement_recon.core.errors import ReconError
from statement_recon.core.export import export_category
from statement_recon.core.matching import ReconciliationResult
from statement_recon.services.reconciliation import run_reconciliation

logger = logging.getLogger(__name__)
router = APIRouter()


class ReconcileResponse(BaseModel):
    success: bool
    summary: dict
    matched: list
    mismatched: list
    internal_only: list
    provider_only: list
    duration_ms: int


# ============================================
# Helpers
# ============================================

async def _read_upload(upload: UploadFile, settings: Settings) -> bytes:
    """Read an upload, enforcing the configured size limit."""
    data = await upload.read()
    if len(data) > settings.max_upload_bytes:
        raise HTTPException(
            status_code=413,
            detail=f"{upload.filename or 'File'} exceeds {settings.max_upload_bytes} bytes",
        )
    return data


async def _reconcile_uploads(
    internal_file: UploadFile,
    provider_file: UploadFile,
    settings: Settings,
) -> ReconciliationResult:
    internal_data = await _read_upload(internal_file, settings)
    provider_data = await _read_upload(provider_file, settings)

    try:
        return run_reconciliation(internal_data, provider_data, settings)
    except ReconError as e:
        logger.warning(f"Reconciliation rejected: {e.message}")
        raise HTTPException(status_code=400, detail=e.message)


# ============================================
# Main Reconciliation Endpoint
# ============================================

@router.post("/reconcile", response_model=ReconcileResponse)
async def run_reconciliation_endpoint(
    internal_file: UploadFile = File(..., description="Internal ledger CSV"),
    provider_file: UploadFile = File(..., description="Provider statement CSV"),
    settings: Settings = Depends(get_settings),
):
    """
    Reconcile two uploaded CSV files.

    1. Parses both files
    2. Rejects empty datasets
    3. Runs the matching engine
    """
    start_time = datetime.now()

    result = await _reconcile_uploads(internal_file, provider_file, settings)

    duration_ms = int((datetime.now() - start_time).total_seconds() * 1000)

    return ReconcileResponse(
        success=True,
        duration_ms=duration_ms,
        **result.to_dict(),
    )


# ============================================
# CSV Export
# ============================================

@router.post("/reconcile/export/{category}")
async def export_reconciliation_category(
    category: str,
    internal_file: UploadFile = File(..., description="Internal ledger CSV"),
    provider_file: UploadFile = File(..., description="Provider statement CSV"),
    on: Optional[str] = None,
    settings: Settings = Depends(get_settings),
):
    """
    Reconcile the uploads and download one category as CSV.

    Categories: matched, mismatched, internal_only, provider_only.
    """
    export_date = None
    if on:
        try:
            export_date = datetime.strptime(on, "%Y-%m-%d").date()
        except ValueError:
            raise HTTPException(status_code=400, detail="Date must be YYYY-MM-DD")

    result = await _reconcile_uploads(internal_file, provider_file, settings)

    try:
        filename, content = export_category(
            result,
            category,
            on=export_date,
            delimiter=settings.csv_delimiter,
        )
    except ReconError as e:
        raise HTTPException(status_code=400, detail=e.message)

    return Response(
        content=content.encode(settings.export_encoding),
        media_type=f"text/csv; charset={settings.export_encoding}",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
