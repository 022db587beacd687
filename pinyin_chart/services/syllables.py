"""
Syllable spelling rules: validity of initial+final pairs, display spelling,
standalone spelling and parsing of written pinyin back to chart symbols.

Spelling conventions applied here (display layer only):
- iou -> iu, uei -> ui, uen -> un after an initial
- ü, üe, üan, ün lose the umlaut after j, q, x

None of these functions raise on bad input; unknown symbols are simply
invalid (False) or have no spelling (None).
"""

import logging
import unicodedata
from typing import Dict, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict

from ..schema.constants import (
    DISPLAY_FINAL_MAP,
    INITIALS_BY_LENGTH,
    ORDINARY_I_STANDALONE,
    PALATAL_SPELLING_MAP,
    PALATAL_VOWEL_SHIFT,
    STANDALONE_FINALS,
    VALID_COMBINATIONS,
    InitialGroups,
    RowContext,
    is_known_final,
    is_known_initial,
)
from ..utils.pinyin_utils import extract_tone

logger = logging.getLogger(__name__)

RowContextArg = Union[RowContext, str, int, None]


class Syllable(BaseModel):
    """One pinyin syllable in chart symbols. Ephemeral, built per lookup."""
    model_config = ConfigDict(frozen=True)

    initial: Optional[str] = None
    final: str
    tone: Optional[int] = None   # 1-4, None = neutral

    @property
    def row_context(self) -> RowContext:
        if self.final == 'i' and self.initial in InitialGroups.APICAL:
            return RowContext.APICAL
        return RowContext.ORDINARY

    @property
    def spelling(self) -> str:
        """Toneless spelling, as a learner would type it."""
        if self.initial:
            return get_display_pinyin(self.initial, self.final)
        return get_standalone(self.final, self.row_context) or self.final


def resolve_row_context(row_context: RowContextArg) -> Optional[RowContext]:
    """
    Map the accepted row arguments onto RowContext.

    0 is the apical 'i' row, any positive chart index an ordinary row,
    None or a negative index means no row was given.
    """
    if row_context is None or isinstance(row_context, bool):
        return None
    if isinstance(row_context, RowContext):
        return row_context
    if isinstance(row_context, int):
        if row_context == 0:
            return RowContext.APICAL
        return RowContext.ORDINARY if row_context > 0 else None
    if isinstance(row_context, str):
        try:
            return RowContext(row_context.lower())
        except ValueError:
            return None
    return None


def get_display_pinyin(initial: str, final: str) -> str:
    """
    Canonical spelling of initial+final, independent of tone.

    Examples:
        ('l', 'iou') -> 'liu'
        ('j', 'ü')   -> 'ju'
        ('n', 'ü')   -> 'nü'
    """
    initial = initial or ''

    if final in DISPLAY_FINAL_MAP:
        return initial + DISPLAY_FINAL_MAP[final]

    if initial in InitialGroups.PALATAL and final in PALATAL_SPELLING_MAP:
        return initial + PALATAL_SPELLING_MAP[final]

    return initial + final


def is_valid_syllable(initial: str, final: str, row_context: RowContextArg = None) -> bool:
    """
    Check whether initial+final is a real syllable of the chart.

    Args:
        initial: Initial symbol (e.g. "zh")
        final: Final symbol in chart form (e.g. "uei", "ü")
        row_context: Chart row index or RowContext. Decides which 'i' is
            meant: the apical row takes only z/c/s/zh/ch/sh/r, the ordinary
            row only b/p/m/d/t/n/l/j/q/x. None skips that check.

    Returns:
        True for a legal combination, False otherwise (including any
        unrecognized input). j/q/x also accept u, un and uan for the
        ü finals.
    """
    if not isinstance(final, str) or not isinstance(initial, str):
        return False
    if not is_known_initial(initial):
        return False
    if not is_known_final(final):
        if not (initial in InitialGroups.PALATAL and final in PALATAL_VOWEL_SHIFT):
            return False

    context = resolve_row_context(row_context)
    if final == 'i':
        if context == RowContext.APICAL:
            return initial in InitialGroups.APICAL and f"{initial}i" in VALID_COMBINATIONS
        if context == RowContext.ORDINARY and initial not in InitialGroups.ORDINARY_I:
            return False

    return get_display_pinyin(initial, final) in VALID_COMBINATIONS


def get_standalone(final: str, row_context: RowContextArg = None) -> Optional[str]:
    """
    Spelling of a final written without an initial (e.g. 'ia' -> 'ya').

    Returns None for finals with no standalone form: the apical 'i', 'ong',
    and unknown symbols. Passing an ordinary row context for 'i' gives 'yi'.
    """
    if not isinstance(final, str):
        return None
    if final == 'i' and resolve_row_context(row_context) == RowContext.ORDINARY:
        return ORDINARY_I_STANDALONE
    return STANDALONE_FINALS.get(final) or None


# ============================================================================
# PARSING WRITTEN PINYIN
# ============================================================================

# Written standalone spelling -> final
_STANDALONE_TO_FINAL: Dict[str, str] = {
    spelling: final for final, spelling in STANDALONE_FINALS.items() if spelling
}
_STANDALONE_TO_FINAL[ORDINARY_I_STANDALONE] = 'i'

_CONTRACTED_TO_FINAL: Dict[str, str] = {v: k for k, v in DISPLAY_FINAL_MAP.items()}
_PALATAL_TO_FINAL: Dict[str, str] = {v: k for k, v in PALATAL_SPELLING_MAP.items()}


def split_syllable(pinyin: str) -> Optional[Tuple[Optional[str], str]]:
    """
    Split a toneless written syllable into (initial, final) chart symbols.

    Initials are matched longest first, so 'zhuang' -> ('zh', 'uang').
    Standalone spellings give a None initial: 'you' -> (None, 'iou').
    Returns None when the rest is not a known final.
    """
    pinyin = unicodedata.normalize('NFC', pinyin.strip().lower()).replace('v', 'ü')
    if not pinyin:
        return None

    if pinyin in _STANDALONE_TO_FINAL:
        return None, _STANDALONE_TO_FINAL[pinyin]

    for initial in INITIALS_BY_LENGTH:
        if not pinyin.startswith(initial):
            continue
        rest = pinyin[len(initial):]
        if initial in InitialGroups.PALATAL and rest in _PALATAL_TO_FINAL:
            final = _PALATAL_TO_FINAL[rest]
        elif rest in _CONTRACTED_TO_FINAL:
            final = _CONTRACTED_TO_FINAL[rest]
        elif rest == 'ue':
            # nüe / lüe typed without the umlaut
            final = 'üe'
        else:
            final = rest
        if is_known_final(final):
            return initial, final
        break

    logger.debug(f"Could not split pinyin syllable: {pinyin!r}")
    return None


def parse_syllable(text: str) -> Optional[Syllable]:
    """
    Parse one written syllable into a Syllable.

    Accepts marked ('zhuàng'), numbered ('zhuang4', 'lv3') and toneless
    spellings.

    Examples:
        'liù'   -> Syllable(initial='l', final='iou', tone=4)
        'xue2'  -> Syllable(initial='x', final='üe', tone=2)
        'wei'   -> Syllable(initial=None, final='uei', tone=None)
    """
    if not isinstance(text, str) or not text.strip():
        return None

    plain, tone = extract_tone(text.strip().lower())
    parts = split_syllable(plain)
    if parts is None:
        return None

    initial, final = parts
    return Syllable(initial=initial, final=final, tone=tone)
