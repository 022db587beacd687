"""
Review Service
Compares the current resolver output against a saved baseline so that
changed syllables can be listened to and accepted or rejected.

Baseline format (written by scripts/generate_baseline_data.py):
    {"<initial>-<final>-<tone>": "<joined text>", ...}
"""

import json
import logging
import math
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

from ..schema.constants import FINALS, INITIALS
from .phonetic import get_baseline_phonetic, get_phonetic
from .syllables import get_display_pinyin, is_valid_syllable

logger = logging.getLogger(__name__)

MISSING_VALUE = "N/A"
DEFAULT_PER_PAGE = 500
TONES = (1, 2, 3, 4)


def review_key(initial: str, final: str, tone: int) -> str:
    return f"{initial}-{final}-{tone}"


def generate_baseline() -> Dict[str, str]:
    """
    Baseline text for every initial x distinct final x tone, valid or not.

    Keys carry no row, so the apical and ordinary 'i' rows share one key
    per initial and tone.
    """
    data = {}
    for initial in INITIALS:
        for final in FINALS:
            for tone in TONES:
                data[review_key(initial, final, tone)] = get_baseline_phonetic(initial, final, tone)
    return data


def load_baseline(file_path: Union[str, Path, None]) -> Dict[str, str]:
    """
    Load a baseline JSON file.

    A missing or unreadable file is logged and gives an empty baseline,
    so every row shows N/A as its old value.
    """
    if not file_path:
        return {}
    path = Path(file_path)
    if not path.exists():
        logger.error(f"Baseline file not found: {path}")
        return {}
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.error(f"Error loading baseline {path}: {e}")
        return {}
    if not isinstance(data, dict):
        logger.error(f"Baseline {path} is not a JSON object")
        return {}
    return data


def build_review_rows(baseline: Dict[str, str], diff_only: bool = True,
                      query: str = "") -> List[Dict[str, Any]]:
    """
    Review rows for every valid syllable and tone.

    Args:
        baseline: Old values keyed by review_key()
        diff_only: Keep only rows whose new value differs from the old one
        query: Substring filter on the numbered pinyin (e.g. "zh" or "i3")

    Returns:
        Rows in chart order (initials, then finals, then tones)
    """
    rows = []
    for initial in INITIALS:
        for row_index, final in enumerate(FINALS):
            if not is_valid_syllable(initial, final, row_index):
                continue
            display = get_display_pinyin(initial, final)
            for tone in TONES:
                key = review_key(initial, final, tone)
                new_value = get_phonetic(initial, final, tone=tone)
                old_value = baseline.get(key) or MISSING_VALUE
                if diff_only and new_value == old_value:
                    continue
                pinyin = f"{display}{tone}"
                if query and query not in pinyin:
                    continue
                rows.append({
                    "key": key,
                    "pinyin": pinyin,
                    "initial": initial,
                    "final": final,
                    "tone": tone,
                    "old_value": old_value,
                    "new_value": new_value,
                })
    return rows


def paginate(rows: List[Dict[str, Any]], page: int = 1,
             per_page: int = DEFAULT_PER_PAGE) -> Dict[str, Any]:
    """Slice one 1-based page out of rows."""
    per_page = max(1, per_page)
    total_pages = max(1, math.ceil(len(rows) / per_page))
    page = min(max(1, page), total_pages)
    start = (page - 1) * per_page
    return {
        "page": page,
        "per_page": per_page,
        "total": len(rows),
        "total_pages": total_pages,
        "rows": rows[start:start + per_page],
    }


def parse_review_key(key: str) -> Optional[Tuple[str, str, int]]:
    """Split "zh-i-3" into (initial, final, tone), or None if it names no syllable."""
    parts = key.split("-")
    if len(parts) != 3 or not parts[2].isdigit():
        return None
    initial, final, tone = parts[0], parts[1], int(parts[2])
    if tone not in TONES or not is_valid_syllable(initial, final):
        return None
    return initial, final, tone
