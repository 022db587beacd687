"""
Urdu Rule Table - "True Sound" phonetic alignment for Mandarin initials/finals.

Based on IPA-driven Mandarin-to-Urdu transliteration, correcting the
Anglocentric errors of the usual pinyin mappings.

Tonal mapping key (Punjabi/Urdu synthesis model):
- Initials: pinyin 'b' is [p] (voiceless), written پ for tones 1-3
- Tone 4 (falling): murmured/aspirated forms (بھ, مھ) or Tashdid (ّ) on the
  initial, which triggers the falling contour
- Finals: a base form plus optional per-tone overrides (Maddah for the long
  tone-1 onset, Hamza for the creaky tone 3)

The table is built once and shared read-only. Hot reload replaces the whole
table through set_rule_table(); individual entries are never patched.
"""

import json
import logging
import threading
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict

logger = logging.getLogger(__name__)


# ============================================================================
# RECORD TYPES
# ============================================================================

class InitialRule(BaseModel):
    """Urdu rendering of one initial."""
    model_config = ConfigDict(frozen=True)

    base: str                              # tones 1-3 and toneless
    tone4_override: Optional[str] = None   # falling-tone form
    ipa: Optional[str] = None
    note: Optional[str] = None

    def text_for(self, tone: Optional[int]) -> str:
        if tone == 4 and self.tone4_override:
            return self.tone4_override
        return self.base


class ToneVariants(BaseModel):
    """A base text with optional per-tone replacements."""
    model_config = ConfigDict(frozen=True)

    base: str
    tone1: Optional[str] = None
    tone2: Optional[str] = None
    tone3: Optional[str] = None
    tone4: Optional[str] = None

    def text_for(self, tone: Optional[int]) -> str:
        """
        Pick the text for a tone.

        Tones 1-4 use the matching override when declared, otherwise the base.
        Neutral (None) always uses the base.
        """
        override = {
            1: self.tone1,
            2: self.tone2,
            3: self.tone3,
            4: self.tone4,
        }.get(tone)
        return override or self.base


class StandaloneForm(ToneVariants):
    """Urdu rendering of a final written without an initial."""


class FinalRule(ToneVariants):
    """Urdu rendering of one final."""

    standalone: Optional[StandaloneForm] = None
    note: Optional[str] = None


# ============================================================================
# RULE TABLE
# ============================================================================

class RuleTable:
    """Immutable pair of initial/final rule mappings."""

    __slots__ = ("initials", "finals")

    def __init__(self, initials: Mapping[str, InitialRule], finals: Mapping[str, FinalRule]):
        self.initials: Mapping[str, InitialRule] = MappingProxyType(dict(initials))
        self.finals: Mapping[str, FinalRule] = MappingProxyType(dict(finals))

    def initial(self, symbol: str) -> Optional[InitialRule]:
        return self.initials.get(symbol)

    def final(self, symbol: str) -> Optional[FinalRule]:
        return self.finals.get(symbol)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RuleTable":
        """
        Build a table from plain data (e.g. parsed JSON).

        Expected shape:
            {"initials": {"b": {"base": "...", "tone4_override": "..."}},
             "finals": {"a": {"base": "...", "tone1": "...", "standalone": {...}}}}

        Raises pydantic.ValidationError on malformed records.
        """
        initials = {
            symbol: InitialRule.model_validate(record)
            for symbol, record in (data.get("initials") or {}).items()
        }
        finals = {
            symbol: FinalRule.model_validate(record)
            for symbol, record in (data.get("finals") or {}).items()
        }
        return cls(initials, finals)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "initials": {k: v.model_dump(exclude_none=True) for k, v in self.initials.items()},
            "finals": {k: v.model_dump(exclude_none=True) for k, v in self.finals.items()},
        }


# ============================================================================
# URDU DATA
# ============================================================================

URDU_INITIALS: Dict[str, InitialRule] = {
    # === STOP CONSONANTS (tonal mapping system) ===
    'b': InitialRule(
        base='پ', tone4_override='بھ', ipa='[p]',
        note='Voiceless unaspirated p. Tone 4 uses بھ for falling tone.',
    ),
    'p': InitialRule(
        base='پھ', tone4_override='پھّ', ipa='[pʰ]',
        note='Aspirated p. Tone 4 uses Tashdid for falling tone emphasis.',
    ),
    'd': InitialRule(
        base='ت', tone4_override='دھ', ipa='[t]',
        note='Unaspirated t. Tone 4 uses دھ (falling tone).',
    ),
    't': InitialRule(
        base='تھ', tone4_override='تھّ', ipa='[tʰ]',
        note='Aspirated t. Tone 4 uses Tashdid for intensity.',
    ),
    'g': InitialRule(
        base='ک', tone4_override='گھ', ipa='[k]',
        note='Unaspirated k. Tone 4 uses گھ (falling tone).',
    ),
    'k': InitialRule(
        base='کھ', tone4_override='کھّ', ipa='[kʰ]',
        note='Aspirated k. Tone 4 uses Tashdid for intensity.',
    ),

    # === OTHER CONSONANTS ===
    # 'm' was declared twice upstream with identical content; one entry kept
    'm': InitialRule(
        base='م', tone4_override='مھ', ipa='[m]',
        note='Tone 4 uses مھ (murmured nasal) to trigger the tonal drop.',
    ),
    'f': InitialRule(
        base='ف', tone4_override='فّ', ipa='[f]',
        note='Tone 4 uses Tashdid for intensity.',
    ),
    'n': InitialRule(
        base='ن', tone4_override='نھ', ipa='[n]',
        note='Tone 4 uses نھ (murmured nasal) to trigger the tonal drop.',
    ),
    'l': InitialRule(
        base='ل', tone4_override='لھ', ipa='[l]',
        note='Tone 4 uses لھ (murmured lateral) to trigger the falling tone.',
    ),
    'h': InitialRule(
        base='خ', tone4_override='خّ', ipa='[x]',
        note='Voiceless velar fricative. Tone 4 uses Tashdid on the initial.',
    ),

    # === PALATALS ===
    'j': InitialRule(
        base='چ', tone4_override='چّ', ipa='[tɕ]',
        note='Palatal unaspirated. Tone 4 uses Tashdid on the initial.',
    ),
    'q': InitialRule(
        base='چھ', tone4_override='چّھ', ipa='[tɕʰ]',
        note='Palatal aspirated. Tone 4 uses Tashdid on the Che part.',
    ),
    'x': InitialRule(
        base='ش', tone4_override='شّ', ipa='[ɕ]',
        note='Palatal fricative. Tone 4 uses Tashdid on the initial.',
    ),

    # === RETROFLEX / DENTAL ===
    'zh': InitialRule(
        base='چ', tone4_override='چّ', ipa='[ʈʂ]',
        note='Retroflex unaspirated. Tone 4 uses Tashdid.',
    ),
    'ch': InitialRule(
        base='چھ', tone4_override='چّھ', ipa='[ʈʂʰ]',
        note='Retroflex aspirated. Tone 4 uses Tashdid on Che.',
    ),
    'sh': InitialRule(
        base='ش', tone4_override='شّ', ipa='[ʂ]',
        note='Retroflex fricative. Tone 4 uses Tashdid.',
    ),
    'r': InitialRule(
        base='ژ', tone4_override='ژّ', ipa='[ʐ]',
        note='Retroflex voiced fricative. Tone 4 uses Tashdid.',
    ),
    'z': InitialRule(
        base='ز', tone4_override='زّ', ipa='[ts]',
        note='Affricate. Tone 4 uses Tashdid.',
    ),
    'c': InitialRule(
        base='تس', tone4_override='تّس', ipa='[tsʰ]',
        note='Aspirated affricate. Tone 4 uses Tashdid on Te.',
    ),
    's': InitialRule(
        base='س', tone4_override='سّ', ipa='[s]',
        note='Sibilant. Tone 4 uses Tashdid.',
    ),
}


URDU_FINALS: Dict[str, FinalRule] = {
    # === A GROUP ===
    'a': FinalRule(
        base='آ', note='Maddah for the a sound.',
        standalone=StandaloneForm(base='آ'),
    ),
    'ia': FinalRule(
        base='یا', tone1='ِیا', note='ia',
        standalone=StandaloneForm(base='یا'),
    ),
    'ua': FinalRule(
        base='وا', note='ua',
        standalone=StandaloneForm(base='وا'),
    ),

    # === O GROUP ===
    'o': FinalRule(
        base='و', tone1='وآ', tone3='وء',
        note='Ends with Wao. Bo is pronounced [puɔ].',
        standalone=StandaloneForm(base='آو', tone1='آو', tone3='آوء', tone4='او'),
    ),
    'uo': FinalRule(
        base='ُوا', note='uo',
        standalone=StandaloneForm(base='وو'),
    ),
    'ou': FinalRule(
        base='او', tone1='آو', tone2='َو', tone3='َوء', tone4='َّو',
        note='Alif + Wao; Zabar forms distinguish pou from po.',
        standalone=StandaloneForm(base='آو', tone1='آو', tone3='آوء', tone4='اَو'),
    ),
    'iou': FinalRule(
        base='یو', tone1='ِیو', tone3='یوء', note='iu',
    ),
    'ao': FinalRule(
        base='اؤ', tone1='آؤ', tone3='اؤء',
        note='Alif + Wao for the ao diphthong.',
        standalone=StandaloneForm(base='آؤ', tone1='آؤ', tone3='آؤء', tone4='آّؤ'),
    ),
    'iao': FinalRule(
        base='یاؤ', tone1='ِیاؤ', tone3='یاوء',
        note='Ye + Alif + Wao for iao.',
    ),

    # === E GROUP ===
    'er': FinalRule(
        base='ر', note='er',
        standalone=StandaloneForm(base='آر', tone1='آر', tone3='آرء', tone4='عَر'),
    ),
    'e': FinalRule(
        base='َ', note='Zabar for e (schwa).',
        standalone=StandaloneForm(base='اے'),
    ),
    'ie': FinalRule(
        base='یے', tone1='ِیے', tone3='یےء',
        note='Ye + Bari Ye for ie.',
        standalone=StandaloneForm(base='یے'),
    ),
    'ue': FinalRule(base='ِیُوَ', note='ue'),
    'ei': FinalRule(
        base='ئے', tone1='آئے', tone3='ئےء',
        note='Mapped as پئے in Urdu Pinyin Table 3.',
        standalone=StandaloneForm(base='ائے', tone1='ائے', tone3='ائےء', tone4='اّئے'),
    ),
    'uei': FinalRule(base='ُوِ', note='ui'),

    # === I GROUP ===
    'i': FinalRule(
        base='ِ', note='Zair for i.',
        standalone=StandaloneForm(base='اِی'),
    ),
    'ai': FinalRule(
        base='ائی', tone1='آئی', tone3='آئے',
        note='Hamza + Ye for the diphthong ai.',
        standalone=StandaloneForm(base='آئی', tone1='آئی', tone3='آئیء', tone4='آئے'),
    ),
    'uai': FinalRule(base='ُوَئی', note='uai'),

    # === U / Ü GROUP ===
    'u': FinalRule(
        base='ُ', note='Pesh for u.',
        standalone=StandaloneForm(base='اُو'),
    ),
    'ü': FinalRule(
        base='ُ', note='ü (Pesh)',
        standalone=StandaloneForm(base='اُو'),
    ),

    # === NASALS - AN GROUP ===
    'an': FinalRule(
        base='َنْ', note='Zabar + Noon + Jazam.',
        standalone=StandaloneForm(base='آن'),
    ),
    'ian': FinalRule(
        base='یان', tone1='ِیان', tone3='یانء',
        note='Ye + Alif + Noon for ian.',
    ),
    'uan': FinalRule(base='وان', note='uan'),
    'üan': FinalRule(base='ِیُوان', note='üan'),
    'üe': FinalRule(base='ِیُوَ', note='üe'),

    # === NASALS - EN GROUP ===
    'en': FinalRule(
        base='َنْ', note='Zabar + Noon + Jazam.',
        standalone=StandaloneForm(base='اَن'),
    ),
    'in': FinalRule(base='ِنْ', note='Zair + Noon + Jazam.'),
    'uen': FinalRule(base='ُنْ', note='un (Pesh + Noon + Jazam)'),
    'ün': FinalRule(base='ُنْ', note='ün (Pesh + Noon + Jazam)'),

    # === NASALS - ANG GROUP ===
    'ang': FinalRule(
        base='َاں', note='Zabar + Alif + Noon Ghunnah.',
        standalone=StandaloneForm(base='آں'),
    ),
    'iang': FinalRule(base='یانگ', tone1='ِیانگ', note='iang'),
    'uang': FinalRule(base='ُوانگ', note='uang'),

    # === NASALS - ENG GROUP ===
    'eng': FinalRule(
        base='َں', note='Zabar + Noon Ghunnah.',
        standalone=StandaloneForm(base='اَں'),
    ),
    'ing': FinalRule(base='ِں', note='Zair + Noon Ghunnah.'),
    'ueng': FinalRule(base='ونگ', note='ueng'),

    'ong': FinalRule(base='ُوں', note='ong (Pesh + Wao + Noon Ghunnah)'),
    'iong': FinalRule(base='یونگ', tone1='ِیونگ', note='iong'),
}


# ============================================================================
# TABLE LIFECYCLE
# ============================================================================

_rule_table: Optional[RuleTable] = None
_rule_table_lock = threading.Lock()


def build_urdu_rule_table() -> RuleTable:
    return RuleTable(URDU_INITIALS, URDU_FINALS)


def get_rule_table() -> RuleTable:
    """Return the shared table, building the built-in Urdu table on first use."""
    global _rule_table
    table = _rule_table
    if table is None:
        with _rule_table_lock:
            if _rule_table is None:
                _rule_table = build_urdu_rule_table()
                logger.debug(
                    f"Built Urdu rule table: {len(_rule_table.initials)} initials, "
                    f"{len(_rule_table.finals)} finals"
                )
            table = _rule_table
    return table


def set_rule_table(table: Optional[RuleTable]) -> Optional[RuleTable]:
    """
    Swap in a whole new table. Returns the table that was replaced.

    None drops the current table; the built-in one is rebuilt on next use.
    """
    global _rule_table
    with _rule_table_lock:
        previous = _rule_table
        _rule_table = table
    if table is None:
        logger.info("Rule table reset to built-in")
    else:
        logger.info(f"Rule table replaced ({len(table.initials)} initials, {len(table.finals)} finals)")
    return previous


def load_rule_table(file_path: Union[str, Path]) -> RuleTable:
    """
    Load a rule table from a JSON file in the RuleTable.from_dict() shape.

    Raises FileNotFoundError, json.JSONDecodeError or pydantic.ValidationError.
    """
    path = Path(file_path)
    with open(path, 'r', encoding='utf-8') as f:
        data = json.load(f)
    table = RuleTable.from_dict(data)
    logger.info(f"Loaded rule table from {path}")
    return table
