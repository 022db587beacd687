"""
Pinyin tone helpers: tone-mark generation for the chart popover, tone
extraction and conversion between numbered (ma3) and marked (mǎ) spellings.
"""

import re
import unicodedata
from typing import List, Optional, Tuple, Union

# Marked forms per vowel: tones 1-4, then the plain (neutral) letter
TONE_MARKS = {
    'a': ['ā', 'á', 'ǎ', 'à', 'a'],
    'o': ['ō', 'ó', 'ǒ', 'ò', 'o'],
    'e': ['ē', 'é', 'ě', 'è', 'e'],
    'i': ['ī', 'í', 'ǐ', 'ì', 'i'],
    'u': ['ū', 'ú', 'ǔ', 'ù', 'u'],
    'ü': ['ǖ', 'ǘ', 'ǚ', 'ǜ', 'ü'],
    'v': ['ǖ', 'ǘ', 'ǚ', 'ǜ', 'ü'],  # v is the keyboard spelling of ü
}

TONE_VOWELS = ('a', 'o', 'e', 'i', 'u', 'ü', 'v')

# Marked vowel -> (plain vowel, tone number)
MARKED_VOWELS = {
    marked: (vowel, tone)
    for vowel, marks in TONE_MARKS.items() if vowel != 'v'
    for tone, marked in enumerate(marks[:4], start=1)
}

NEUTRAL_TONES = (None, 0, 5)


def normalize_tone(tone: Union[int, str, None]) -> Optional[int]:
    """
    Coerce a tone argument to 1-4, or None for neutral/untoned.

    Accepts ints and numeric strings ("3"). Anything outside 1-4 is neutral.
    """
    if isinstance(tone, bool):
        return None
    if isinstance(tone, str):
        tone = tone.strip()
        if not tone.isdigit():
            return None
        tone = int(tone)
    if isinstance(tone, int) and 1 <= tone <= 4:
        return tone
    return None


def find_tone_vowel(pinyin: str) -> int:
    """
    Index of the vowel that carries the tone mark, or -1 if there is none.

    Precedence: the first 'a', else the first 'e', else the 'o' of 'ou',
    else the right-most vowel letter.
    """
    if 'a' in pinyin:
        return pinyin.index('a')
    if 'e' in pinyin:
        return pinyin.index('e')
    if 'ou' in pinyin:
        return pinyin.index('o')
    for i in range(len(pinyin) - 1, -1, -1):
        if pinyin[i] in TONE_VOWELS:
            return i
    return -1


def get_tones(pinyin: str) -> List[str]:
    """
    The five tone spellings of a syllable: tones 1-4, then neutral.

    Examples:
        'ma'   -> ['mā', 'má', 'mǎ', 'mà', 'ma']
        'shui' -> ['shuī', 'shuí', 'shuǐ', 'shuì', 'shui']

    A syllable without a vowel letter comes back unchanged five times.
    """
    index = find_tone_vowel(pinyin)
    if index == -1:
        return [pinyin] * 5

    marks = TONE_MARKS[pinyin[index]]
    pre = pinyin[:index]
    post = pinyin[index + 1:]
    tones = [pre + marks[i] + post for i in range(4)]
    tones.append(pinyin)  # Neutral
    return tones


def extract_tone(pinyin: str) -> Tuple[str, Optional[int]]:
    """
    Extract the tone from a syllable and return (plain syllable, tone).

    Examples:
        'zhuàng' -> ('zhuang', 4)
        'mā'     -> ('ma', 1)
        'zhong1' -> ('zhong', 1)
        'ma5'    -> ('ma', None)
        'lü'     -> ('lü', None)
    """
    pinyin = unicodedata.normalize('NFC', pinyin)

    numeric_match = re.search(r'([0-5])$', pinyin)
    if numeric_match:
        return pinyin[:-1], normalize_tone(int(numeric_match.group(1)))

    for i, char in enumerate(pinyin):
        if char in MARKED_VOWELS:
            vowel, tone = MARKED_VOWELS[char]
            return pinyin[:i] + vowel + pinyin[i + 1:], tone

    return pinyin, None


def strip_tones(pinyin: str) -> str:
    """
    Remove tone marks, keeping ü.
    Example: 'lǚ xíng' -> 'lü xing'
    """
    if not pinyin:
        return ""
    return ''.join(MARKED_VOWELS[c][0] if c in MARKED_VOWELS else c
                   for c in unicodedata.normalize('NFC', pinyin))


def numbered_to_marked(pinyin: str) -> str:
    """
    Convert a numbered syllable to its marked spelling.
    Example: 'lv3' -> 'lǚ', 'ma5' -> 'ma'
    """
    plain, tone = extract_tone(pinyin)
    plain = plain.replace('v', 'ü')
    if tone is None:
        return plain
    return get_tones(plain)[tone - 1]


def audio_name(pinyin: str, tone: int) -> str:
    """File stem of a syllable recording, e.g. ('lü', 3) -> 'lv3'."""
    return f"{strip_tones(pinyin).replace('ü', 'v')}{tone}"
