"""
Chart inventories, the phonetic rule table and character glosses
"""

from .constants import (
    DISPLAY_FINAL_MAP,
    FINALS,
    INITIALS,
    STANDALONE_FINALS,
    VALID_COMBINATIONS,
    DisplayMode,
    InitialGroups,
    RowContext,
    Script,
)
from .glosses import CHAR_GLOSSES, get_gloss
from .rules import (
    FinalRule,
    InitialRule,
    RuleTable,
    StandaloneForm,
    get_rule_table,
    load_rule_table,
    set_rule_table,
)

__all__ = [
    # Inventories
    'INITIALS',
    'FINALS',
    'STANDALONE_FINALS',
    'DISPLAY_FINAL_MAP',
    'VALID_COMBINATIONS',
    'InitialGroups',
    # Enums
    'RowContext',
    'Script',
    'DisplayMode',
    # Rule table
    'InitialRule',
    'FinalRule',
    'StandaloneForm',
    'RuleTable',
    'get_rule_table',
    'set_rule_table',
    'load_rule_table',
    # Glosses
    'CHAR_GLOSSES',
    'get_gloss',
]
