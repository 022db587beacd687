"""
Phonetic Resolver - renders an initial+final+tone as target-script text.

Resolution order:
1. look up the initial
2. redirect j/q/x + u/un/uan to the ü family
3. look up the (redirected) final
4. pick the tone text of each part
5. apply the exception rules, in order
6. compose (joined, or "<initial> + <final>" for the chart)

Unknown symbols and unsupported scripts give "" rather than raising.
"""

import logging
import re
from dataclasses import dataclass
from typing import Callable, FrozenSet, Optional, Tuple, Union

from ..schema.constants import (
    PALATAL_VOWEL_SHIFT,
    DisplayMode,
    InitialGroups,
    RowContext,
    Script,
)
from ..schema.rules import FinalRule, get_rule_table
from ..utils.pinyin_utils import normalize_tone
from .syllables import RowContextArg, resolve_row_context

logger = logging.getLogger(__name__)

TATWEEL = 'ـ'

# Fathatan .. Sukun; a final starting with one of these has nothing to sit on
# when shown apart from its initial
_LEADING_MARK = re.compile(r'^[\u064B-\u0652]')

ToneArg = Union[int, str, None]


# ============================================================================
# EXCEPTION RULES
# ============================================================================

@dataclass(frozen=True)
class ExceptionRule:
    """A hand-tuned override of the final text for one class of syllables."""
    name: str
    initials: FrozenSet[str]
    finals: FrozenSet[str]
    tones: Optional[FrozenSet[int]]   # None = any tone, neutral included
    final_text: Callable[[str, Optional[int]], str]

    def matches(self, initial: str, final: str, tone: Optional[int]) -> bool:
        if self.tones is not None and tone not in self.tones:
            return False
        return initial in self.initials and final in self.finals


_TONE1_SHORT_EN_INITIALS = frozenset({
    'f', 'd', 't', 'n', 'l', 'g', 'k', 'h',
    'z', 'c', 's', 'zh', 'ch', 'sh', 'r',
})
_TONE1_OU_INITIALS = _TONE1_SHORT_EN_INITIALS - {'f'}

EXCEPTION_RULES: Tuple[ExceptionRule, ...] = (
    # fēn, dēng, ... take the short vowel instead of the long tone-1 onset
    ExceptionRule(
        name='tone1-en-eng-short-vowel',
        initials=_TONE1_SHORT_EN_INITIALS,
        finals=frozenset({'en', 'eng'}),
        tones=frozenset({1}),
        final_text=lambda final, tone: 'َن' if final == 'en' else 'َنگ',
    ),
    # dōu, gōu, ...: Zabar + Wao
    ExceptionRule(
        name='tone1-ou-zabar-wao',
        initials=_TONE1_OU_INITIALS,
        finals=frozenset({'ou'}),
        tones=frozenset({1}),
        final_text=lambda final, tone: 'َو',
    ),
    # nüē / lüē
    ExceptionRule(
        name='tone1-nl-ue',
        initials=frozenset({'n', 'l'}),
        finals=frozenset({'ue', 'üe'}),
        tones=frozenset({1}),
        final_text=lambda final, tone: 'ِیُوَ',
    ),
    # Buzzed i of zi, ci, si, zhi, chi, shi, ri. Must stay last.
    ExceptionRule(
        name='apical-i',
        initials=InitialGroups.APICAL,
        finals=frozenset({'i'}),
        tones=None,
        final_text=lambda final, tone: 'ِء' if tone == 3 else 'ِ',
    ),
)


def apply_exception_rules(initial: str, final: str, tone: Optional[int], final_text: str) -> str:
    """Run every matching rule in order; a later match overrides an earlier one."""
    for rule in EXCEPTION_RULES:
        if rule.matches(initial, final, tone):
            final_text = rule.final_text(final, tone)
    return final_text


# ============================================================================
# RESOLVER
# ============================================================================

def shift_palatal_vowel(initial: str, final: str) -> str:
    """j/q/x + u/un/uan are really ü/ün/üan."""
    if initial in InitialGroups.PALATAL:
        return PALATAL_VOWEL_SHIFT.get(final, final)
    return final


def compose(initial_text: str, final_text: str, display_mode: Union[DisplayMode, str, None] = DisplayMode.JOINED) -> str:
    """
    Put the two halves together.

    Separated mode prefixes a Tatweel to a final that starts with a bare
    vowel mark, so the mark has a stroke to sit on.
    """
    if _parse_display_mode(display_mode) == DisplayMode.SEPARATED:
        if _LEADING_MARK.match(final_text):
            final_text = TATWEEL + final_text
        return f"{initial_text} + {final_text}"
    return initial_text + final_text


def _parse_display_mode(display_mode) -> DisplayMode:
    if isinstance(display_mode, DisplayMode):
        return display_mode
    try:
        return DisplayMode(str(display_mode).lower())
    except ValueError:
        logger.debug(f"Unknown display mode {display_mode!r}, using joined")
        return DisplayMode.JOINED


def _is_supported_script(script) -> bool:
    if isinstance(script, Script):
        return True
    try:
        Script(str(script).lower())
    except ValueError:
        logger.debug(f"No phonetic rules for script {script!r}")
        return False
    return True


def _resolve_parts(initial: str, final: str, tone: Optional[int]) -> Optional[Tuple[str, str, str]]:
    """(initial text, final text, redirected final) before exceptions, or None."""
    table = get_rule_table()
    initial_rule = table.initial(initial)
    if initial_rule is None:
        logger.debug(f"Unknown initial: {initial!r}")
        return None

    shifted = shift_palatal_vowel(initial, final)
    final_rule = table.final(shifted) or table.final(final)
    if final_rule is None:
        logger.debug(f"Unknown final: {final!r}")
        return None

    return initial_rule.text_for(tone), final_rule.text_for(tone), shifted


def get_phonetic(initial: str, final: str, script: Union[Script, str] = Script.URDU,
                 display_mode: Union[DisplayMode, str] = DisplayMode.JOINED,
                 tone: ToneArg = None) -> str:
    """
    Phonetic text of a syllable in the target script.

    Args:
        initial: Initial symbol (e.g. "b")
        final: Final symbol in chart form (e.g. "iou")
        script: Target script; only "urdu" has rules
        display_mode: "joined" or "separated"
        tone: 1-4 (int or numeric string); None, 0 or 5 for neutral

    Returns:
        The text, or "" for an unknown symbol or script

    Examples:
        get_phonetic('b', 'a', tone=1)                 -> 'پآ'
        get_phonetic('b', 'a', 'urdu', 'separated', 1) -> 'پ + آ'
        get_phonetic('zh', 'i', tone=3)                -> 'چِء'
    """
    if not isinstance(initial, str) or not isinstance(final, str):
        return ""
    if not _is_supported_script(script):
        return ""

    tone = normalize_tone(tone)
    parts = _resolve_parts(initial, final, tone)
    if parts is None:
        return ""

    initial_text, final_text, shifted = parts
    final_text = apply_exception_rules(initial, shifted, tone, final_text)
    return compose(initial_text, final_text, display_mode)


def get_baseline_phonetic(initial: str, final: str, tone: ToneArg = None) -> str:
    """Joined Urdu text from the table alone, without the exception rules."""
    if not isinstance(initial, str) or not isinstance(final, str):
        return ""
    parts = _resolve_parts(initial, final, normalize_tone(tone))
    if parts is None:
        return ""
    initial_text, final_text, _ = parts
    return initial_text + final_text


# ============================================================================
# HEADERS AND STANDALONE FORMS
# ============================================================================

def get_initial_phonetic(initial: str, script: Union[Script, str] = Script.URDU) -> str:
    """Column header text of an initial."""
    if not _is_supported_script(script):
        return ""
    rule = get_rule_table().initial(initial)
    return rule.base if rule else ""


def get_final_phonetic(final: str, script: Union[Script, str] = Script.URDU) -> str:
    """Row header text of a final."""
    if not _is_supported_script(script):
        return ""
    rule = get_rule_table().final(final)
    return rule.base if rule else ""


def get_standalone_phonetic(final: str, tone: ToneArg = None,
                            script: Union[Script, str] = Script.URDU,
                            row_context: RowContextArg = None) -> str:
    """
    Text of a final written without an initial (e.g. 'o' -> 'آو').

    The apical 'i' has no standalone form, so 'i' only resolves when the
    ordinary row is meant. Finals without a declared standalone give "".
    """
    if not isinstance(final, str) or not _is_supported_script(script):
        return ""
    if final == 'i' and resolve_row_context(row_context) != RowContext.ORDINARY:
        return ""

    rule: Optional[FinalRule] = get_rule_table().final(final)
    if rule is None or rule.standalone is None:
        return ""
    return rule.standalone.text_for(normalize_tone(tone))
