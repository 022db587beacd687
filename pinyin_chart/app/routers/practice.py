"""
Practice API - pinyin and phonetic annotation for practice sheets
"""

from typing import Optional

from fastapi import APIRouter
from pydantic import BaseModel

from ...services.practice_service import annotate_text
from ..core.params import parse_display_mode, parse_script

router = APIRouter(prefix="/practice", tags=["practice"])


class AnnotateRequest(BaseModel):
    text: str
    script: Optional[str] = None
    display_mode: Optional[str] = None


@router.post("/annotate")
def annotate(body: AnnotateRequest):
    """Annotate every character of the text."""
    script = parse_script(body.script)
    mode = parse_display_mode(body.display_mode)
    return {
        "text": body.text,
        "script": script.value,
        "display_mode": mode.value,
        "characters": annotate_text(body.text, script, mode),
    }
