"""
Chart Service
Builds the data behind the pinyin chart grid and the per-cell tone popover.
"""

import logging
from typing import Any, Dict, List, Optional, Union

from ..schema.constants import (
    APICAL_ROW_INDEX,
    FINALS,
    INITIALS,
    DisplayMode,
    RowContext,
    Script,
)
from ..utils.pinyin_utils import audio_name, get_tones
from .phonetic import (
    ToneArg,
    get_final_phonetic,
    get_initial_phonetic,
    get_phonetic,
    get_standalone_phonetic,
)
from .syllables import get_display_pinyin, get_standalone, is_valid_syllable

logger = logging.getLogger(__name__)


def build_header_row(script: Union[Script, str] = Script.URDU) -> List[Dict[str, str]]:
    """Column headers: each initial with its base text."""
    return [
        {"initial": initial, "phonetic": get_initial_phonetic(initial, script)}
        for initial in INITIALS
    ]


def build_cell(initial: str, final: str, row_index: int,
               script: Union[Script, str] = Script.URDU,
               display_mode: Union[DisplayMode, str] = DisplayMode.JOINED,
               tone: ToneArg = None) -> Optional[Dict[str, str]]:
    """One grid cell, or None where the combination does not exist."""
    if not is_valid_syllable(initial, final, row_index):
        return None
    return {
        "initial": initial,
        "final": final,
        "pinyin": get_display_pinyin(initial, final),
        "phonetic": get_phonetic(initial, final, script, display_mode, tone),
    }


def build_chart(script: Union[Script, str] = Script.URDU,
                display_mode: Union[DisplayMode, str] = DisplayMode.JOINED,
                tone: ToneArg = None) -> List[Dict[str, Any]]:
    """
    All chart rows, in FINALS order.

    Each row carries its header (-final and its base text), the standalone
    spelling with its text, and one cell per initial in INITIALS order.
    """
    rows = []
    for row_index, final in enumerate(FINALS):
        row_context = RowContext.APICAL if row_index == APICAL_ROW_INDEX else RowContext.ORDINARY
        rows.append({
            "final": final,
            "row_index": row_index,
            "row_context": row_context.value,
            "header": f"-{final}",
            "phonetic": get_final_phonetic(final, script),
            "standalone": get_standalone(final, row_context),
            "standalone_phonetic": get_standalone_phonetic(final, tone, script, row_context),
            "cells": [
                build_cell(initial, final, row_index, script, display_mode, tone)
                for initial in INITIALS
            ],
        })

    logger.debug(f"Built chart: {len(rows)} rows x {len(INITIALS)} initials")
    return rows


def build_tone_popover(initial: str, final: str,
                       script: Union[Script, str] = Script.URDU) -> Optional[Dict[str, Any]]:
    """
    Tone popover of one cell: the four tone spellings with their text and
    recording names.

    Returns None for an invalid combination.
    """
    if not is_valid_syllable(initial, final):
        return None

    pinyin = get_display_pinyin(initial, final)
    marked = get_tones(pinyin)
    return {
        "pinyin": pinyin,
        "phonetic": get_phonetic(initial, final, script),
        "tones": [
            {
                "tone": tone,
                "pinyin": marked[tone - 1],
                "phonetic": get_phonetic(initial, final, script, DisplayMode.JOINED, tone),
                "audio_name": audio_name(pinyin, tone),
            }
            for tone in range(1, 5)
        ],
    }
