"""
Practice Service
Annotates Chinese text for practice sheets: every Han character gets its
tone-marked pinyin, its phonetic text in the target script and, for
common characters, an English gloss.
"""

import logging
import re
from typing import Dict, List, Union

from pypinyin import Style, pinyin

from ..schema.constants import DisplayMode, RowContext, Script
from ..schema.glosses import get_gloss
from ..utils.pinyin_utils import numbered_to_marked
from .phonetic import get_phonetic, get_standalone_phonetic
from .syllables import Syllable, parse_syllable

logger = logging.getLogger(__name__)

_HAN_CHAR = re.compile(r'[\u3400-\u4DBF\u4E00-\u9FFF\uF900-\uFAFF]')


def is_han(char: str) -> bool:
    return bool(_HAN_CHAR.fullmatch(char))


def syllable_phonetic(syllable: Syllable, script: Union[Script, str] = Script.URDU,
                      display_mode: Union[DisplayMode, str] = DisplayMode.JOINED) -> str:
    """Phonetic text of a parsed syllable; standalone syllables use the final's own form."""
    if syllable.initial:
        return get_phonetic(syllable.initial, syllable.final, script, display_mode, syllable.tone)
    return get_standalone_phonetic(syllable.final, syllable.tone, script, RowContext.ORDINARY)


def char_pinyin(char: str) -> str:
    """Numbered pinyin of one character, e.g. '女' -> 'nv3'. Neutral tone is 5."""
    result = pinyin(char, style=Style.TONE3, neutral_tone_with_five=True, errors='ignore')
    if not result or not result[0]:
        return ""
    return result[0][0]


def annotate_text(text: str, script: Union[Script, str] = Script.URDU,
                  display_mode: Union[DisplayMode, str] = DisplayMode.JOINED) -> List[Dict[str, str]]:
    """
    Per-character annotation of a text.

    Returns:
        One {char, pinyin, phonetic, meaning} dict per character. Characters
        that are not Han, or whose reading does not parse, keep empty
        pinyin/phonetic. meaning is "" for characters without a gloss.

    Example:
        annotate_text('你好') -> [{'char': '你', 'pinyin': 'nǐ', ...},
                                  {'char': '好', 'pinyin': 'hǎo', ...}]
    """
    annotations = []
    for char in text or "":
        entry = {"char": char, "pinyin": "", "phonetic": "", "meaning": ""}
        if is_han(char):
            entry["meaning"] = get_gloss(char)
            numbered = char_pinyin(char)
            syllable = parse_syllable(numbered) if numbered else None
            if syllable is None:
                logger.debug(f"No usable reading for {char!r} ({numbered!r})")
            else:
                entry["pinyin"] = numbered_to_marked(numbered)
                entry["phonetic"] = syllable_phonetic(syllable, script, display_mode)
        annotations.append(entry)
    return annotations
