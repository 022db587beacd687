"""
Query value checks shared by the routers. Bad values become HTTP 400.
"""

from typing import Optional

from fastapi import HTTPException

from ...config import settings
from ...schema.constants import DisplayMode, Script


def parse_display_mode(value: Optional[str]) -> DisplayMode:
    value = value or settings.display_mode
    try:
        return DisplayMode(value.lower())
    except ValueError:
        allowed = ", ".join(m.value for m in DisplayMode)
        raise HTTPException(status_code=400, detail=f"Unknown display_mode '{value}' (expected one of: {allowed})")


def parse_script(value: Optional[str]) -> Script:
    value = value or settings.script
    try:
        return Script(value.lower())
    except ValueError:
        allowed = ", ".join(s.value for s in Script)
        raise HTTPException(status_code=400, detail=f"Unknown script '{value}' (expected one of: {allowed})")


def parse_tone(value: Optional[int]) -> Optional[int]:
    """1-4 pass through; None, 0 and 5 are neutral (None)."""
    if value is None or value in (0, 5):
        return None
    if 1 <= value <= 4:
        return value
    raise HTTPException(status_code=400, detail=f"Tone must be between 0 and 5, got {value}")
