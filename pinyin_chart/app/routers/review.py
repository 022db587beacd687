"""
Review API - diff of current output against the baseline, plus the
decisions recorded for each changed syllable
"""

import logging
from typing import Literal, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel
from sqlalchemy.orm import Session

from ...database.db import get_db
from ...database.services import ReviewChoiceService
from ...services import review_service
from ..core.config import BASELINE_FILE

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/review", tags=["review"])


class ReviewChoiceUpdate(BaseModel):
    action: Optional[Literal["new", "old", "custom"]] = None
    custom_value: Optional[str] = None


def get_baseline():
    """Baseline dependency; re-read per request so a regenerated file is picked up."""
    return review_service.load_baseline(BASELINE_FILE)


@router.get("/rows")
def get_review_rows(diff_only: bool = True, query: str = "",
                    page: int = Query(1, ge=1),
                    per_page: int = Query(review_service.DEFAULT_PER_PAGE, ge=1, le=5000),
                    baseline: dict = Depends(get_baseline)):
    """Paginated review rows."""
    rows = review_service.build_review_rows(baseline, diff_only=diff_only, query=query)
    return review_service.paginate(rows, page, per_page)


@router.get("/choices")
def list_choices(db: Session = Depends(get_db)):
    """Every recorded decision, 'new' included."""
    choices = ReviewChoiceService.get_all(db)
    return {
        "reviewed": len(choices),
        "choices": {choice.key: choice.to_dict() for choice in choices},
    }


@router.put("/choices/{key}")
def update_choice(key: str, body: ReviewChoiceUpdate, db: Session = Depends(get_db)):
    """Record an action, or a custom value (which implies the 'custom' action)."""
    if review_service.parse_review_key(key) is None:
        raise HTTPException(status_code=404, detail=f"No reviewable syllable '{key}'")
    if body.custom_value is not None:
        choice = ReviewChoiceService.set_custom_value(db, key, body.custom_value)
    elif body.action is not None:
        choice = ReviewChoiceService.set_action(db, key, body.action)
    else:
        raise HTTPException(status_code=400, detail="Provide an action or a custom_value")
    return {"key": choice.key, **choice.to_dict()}


@router.delete("/choices/{key}")
def delete_choice(key: str, db: Session = Depends(get_db)):
    if not ReviewChoiceService.delete(db, key):
        raise HTTPException(status_code=404, detail=f"No choice recorded for '{key}'")
    return {"deleted": key}


@router.get("/export")
def export_choices(db: Session = Depends(get_db)):
    """Decisions other than 'new', ready to be applied to the rule table."""
    return ReviewChoiceService.export(db)
