"""
Pinyin chart and Urdu transliteration engine.

    >>> from pinyin_chart import get_phonetic, get_tones
    >>> get_phonetic('b', 'a', tone=1)
    'پآ'
    >>> get_tones('shui')[2]
    'shuǐ'
"""

__version__ = "1.0.0"

from .services.phonetic import get_phonetic
from .services.syllables import get_display_pinyin, get_standalone, is_valid_syllable
from .utils.pinyin_utils import get_tones

__all__ = [
    'get_display_pinyin',
    'get_phonetic',
    'get_standalone',
    'get_tones',
    'is_valid_syllable',
]
