"""
Chart API - pinyin chart grid, single syllables and tone popovers
"""

import logging
from typing import Optional

from fastapi import APIRouter, HTTPException

from ...schema.constants import (
    FINALS,
    INITIALS,
    STANDALONE_FINALS,
    ORDINARY_I_STANDALONE,
    is_known_final,
    is_known_initial,
)
from ...services import chart_service
from ...services.phonetic import get_phonetic
from ...services.syllables import get_display_pinyin, is_valid_syllable
from ...utils.pinyin_utils import get_tones
from ..core.params import parse_display_mode, parse_script, parse_tone

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/chart", tags=["chart"])


def _require_symbols(initial: str, final: str):
    if not is_known_initial(initial):
        raise HTTPException(status_code=404, detail=f"Unknown initial '{initial}'")
    if not is_known_final(final):
        raise HTTPException(status_code=404, detail=f"Unknown final '{final}'")


@router.get("/inventory")
def get_inventory():
    """Initials and finals in chart order, with standalone spellings."""
    return {
        "initials": INITIALS,
        "finals": FINALS,
        "standalone_finals": STANDALONE_FINALS,
        "ordinary_i_standalone": ORDINARY_I_STANDALONE,
    }


@router.get("")
def get_chart(script: Optional[str] = None, display_mode: Optional[str] = None,
              tone: Optional[int] = None):
    """The whole chart: header row plus one row per final."""
    script_value = parse_script(script)
    mode = parse_display_mode(display_mode)
    tone_value = parse_tone(tone)
    return {
        "script": script_value.value,
        "display_mode": mode.value,
        "tone": tone_value,
        "header": chart_service.build_header_row(script_value),
        "rows": chart_service.build_chart(script_value, mode, tone_value),
    }


@router.get("/syllable/{initial}/{final}")
def get_syllable(initial: str, final: str, tone: Optional[int] = None,
                 display_mode: Optional[str] = None, script: Optional[str] = None,
                 row: Optional[int] = None):
    """One initial+final: validity, spelling, phonetic text and tone spellings."""
    _require_symbols(initial, final)
    script_value = parse_script(script)
    mode = parse_display_mode(display_mode)
    tone_value = parse_tone(tone)

    pinyin = get_display_pinyin(initial, final)
    return {
        "initial": initial,
        "final": final,
        "valid": is_valid_syllable(initial, final, row),
        "pinyin": pinyin,
        "tone": tone_value,
        "phonetic": get_phonetic(initial, final, script_value, mode, tone_value),
        "tones": get_tones(pinyin),
    }


@router.get("/tones/{syllable}")
def get_syllable_tones(syllable: str):
    """The five tone spellings (1-4, then neutral)."""
    return {"pinyin": syllable, "tones": get_tones(syllable)}


@router.get("/popover/{initial}/{final}")
def get_tone_popover(initial: str, final: str, script: Optional[str] = None):
    """Data for the tone popover of one chart cell."""
    _require_symbols(initial, final)
    popover = chart_service.build_tone_popover(initial, final, parse_script(script))
    if popover is None:
        raise HTTPException(status_code=404, detail=f"'{initial}' + '{final}' is not a syllable")
    return popover
