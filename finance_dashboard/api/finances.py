import logging
from pathlib import Path
from typing import List, Optional

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile
from sqlmodel import Session

from finance_dashboard.core.config import MAX_UPLOAD_SIZE
from finance_dashboard.database import get_session
from finance_dashboard.models.user import User
from finance_dashboard.schemas.finance import (
    FinancesRead,
    FinancialRecordRead,
    UploadResult,
    UserRead,
)
from finance_dashboard.utils.record_helpers import list_records_for_year, replace_records
from finance_dashboard.utils.spreadsheet_helpers import extract_records, read_first_sheet
from finance_dashboard.utils.upload_helpers import (
    get_upload_dir,
    has_allowed_extension,
    remove_temp_file,
    save_upload,
    upload_size,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/finances", tags=["finances"])


@router.post("/upload/{user_id}/{year}", response_model=UploadResult)
def upload_finances(
    user_id: int,
    year: int,
    file: Optional[List[UploadFile]] = File(None),
    session: Session = Depends(get_session),
    upload_dir: Path = Depends(get_upload_dir),
):
    """
    Replace a user's records for `year` with the rows of an .xlsx upload.

    Only the first sheet is read; it needs "Month" and "Amount" columns.
    The temporary copy of the file is removed before responding.
    """
    if not file:
        raise HTTPException(status_code=400, detail="No file uploaded")
    if len(file) > 1:
        raise HTTPException(status_code=400, detail="Only one file may be uploaded")
    file = file[0]
    if not file.filename:
        raise HTTPException(status_code=400, detail="No file uploaded")
    if not has_allowed_extension(file.filename):
        raise HTTPException(status_code=400, detail="Only .xlsx files are allowed")
    if upload_size(file) > MAX_UPLOAD_SIZE:
        raise HTTPException(status_code=400, detail="File too large (max 10 MB)")

    file_path = None
    try:
        file_path = save_upload(file, upload_dir)

        if session.get(User, user_id) is None:
            raise HTTPException(status_code=404, detail="User not found")

        rows = read_first_sheet(file_path)
        to_insert = extract_records(rows)
        if not to_insert:
            raise HTTPException(status_code=400, detail="No valid rows found")

        inserted = replace_records(session, user_id, year, to_insert)
    except HTTPException:
        raise
    except Exception as exc:
        logger.exception("Upload failed for user %s, year %s", user_id, year)
        raise HTTPException(status_code=500, detail=str(exc) or "Internal Server Error")
    finally:
        remove_temp_file(file_path)

    logger.info("User %s uploaded %d records for %s", user_id, inserted, year)
    return UploadResult(message="File processed and data saved", inserted=inserted)


@router.get("/{user_id}/{year}", response_model=FinancesRead)
def get_finances(
    user_id: int,
    year: int,
    session: Session = Depends(get_session),
):
    try:
        user = session.get(User, user_id)
        if user is None:
            raise HTTPException(status_code=404, detail="User not found")

        records = list_records_for_year(session, user_id, year)
        return FinancesRead(
            user=UserRead.model_validate(user),
            year=year,
            records=[FinancialRecordRead.model_validate(r) for r in records],
        )
    except HTTPException:
        raise
    except Exception:
        logger.exception("Fetching records failed for user %s, year %s", user_id, year)
        raise HTTPException(status_code=500, detail="Server error")
