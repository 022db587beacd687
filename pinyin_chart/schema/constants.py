"""
Pinyin Chart Schema Constants
Central repository for the chart inventories: initials, finals, standalone
spellings, display contractions and the legal initial+final combinations.

Layout follows the Yoyo Chinese pinyin chart:
- columns are initials (no y/w; those live in the standalone column)
- rows are finals, with the apical 'i' row first and the ordinary 'i' row
  in the i group
"""

from enum import Enum
from typing import Dict, FrozenSet, List, Optional


# ============================================================================
# INITIALS (columns)
# ============================================================================

INITIALS: List[str] = [
    'b', 'p', 'm', 'f', 'd', 't', 'n', 'l', 'g', 'k', 'h',
    'j', 'q', 'x',
    'z', 'c', 's',       # z, c, s BEFORE zh, ch, sh
    'zh', 'ch', 'sh', 'r',
]

# Longest first, so 'zh' is matched before 'z' when splitting a syllable
INITIALS_BY_LENGTH: List[str] = sorted(INITIALS, key=len, reverse=True)


class InitialGroups:
    """Initial sets the spelling and exception rules are keyed on"""

    # Initials that take the apical (buzzed) 'i': zi, ci, si, zhi, chi, shi, ri
    APICAL = frozenset({'z', 'c', 's', 'zh', 'ch', 'sh', 'r'})

    # Initials that take the ordinary close front 'i'
    ORDINARY_I = frozenset({'b', 'p', 'm', 'd', 't', 'n', 'l', 'j', 'q', 'x'})

    # Palatals: 'ü' is written 'u' after these
    PALATAL = frozenset({'j', 'q', 'x'})


# ============================================================================
# FINALS (rows)
# ============================================================================

FINALS: List[str] = [
    # Row 0: special 'i' for z/c/s/zh/ch/sh/r (zi, ci, si, zhi, chi, shi, ri)
    'i',
    # a group
    'a', 'ai', 'an', 'ang', 'ao',
    # e group
    'e', 'ei', 'en', 'eng', 'er',
    # i group (normal)
    'i', 'ia', 'ian', 'iang', 'iao', 'ie', 'in', 'ing', 'iong', 'iou',
    # o group
    'o', 'ong', 'ou',
    # u group
    'u', 'ua', 'uai', 'uan', 'uang', 'uei', 'uen', 'ueng', 'uo',
    # ü group
    'ü', 'üan', 'üe', 'ün',
]

APICAL_ROW_INDEX = 0
ORDINARY_I_ROW_INDEX = FINALS.index('i', 1)


class RowContext(str, Enum):
    """Which of the two 'i' rows a chart cell belongs to"""
    APICAL = "apical"
    ORDINARY = "ordinary"


class Script(str, Enum):
    """Target scripts for phonetic output"""
    URDU = "urdu"


class DisplayMode(str, Enum):
    """How initial and final glyphs are put together"""
    JOINED = "joined"          # initial and final concatenated
    SEPARATED = "separated"    # "<initial> + <final>", for the chart UI


# Standalone finals (column 2 in Yoyo) - finals written without an initial
STANDALONE_FINALS: Dict[str, Optional[str]] = {
    'i': None,  # the apical row has no standalone; ordinary 'i' is looked up below
    'a': 'a', 'ai': 'ai', 'an': 'an', 'ang': 'ang', 'ao': 'ao',
    'e': 'e', 'ei': 'ei', 'en': 'en', 'eng': 'eng', 'er': 'er',
    # i group standalone uses y-
    'ia': 'ya', 'ian': 'yan', 'iang': 'yang', 'iao': 'yao', 'ie': 'ye',
    'in': 'yin', 'ing': 'ying', 'iong': 'yong', 'iou': 'you',
    # o group
    'o': 'o', 'ong': None, 'ou': 'ou',
    # u group standalone uses w-
    'u': 'wu', 'ua': 'wa', 'uai': 'wai', 'uan': 'wan', 'uang': 'wang',
    'uei': 'wei', 'uen': 'wen', 'ueng': 'weng', 'uo': 'wo',
    # ü group standalone uses yu-
    'ü': 'yu', 'üan': 'yuan', 'üe': 'yue', 'ün': 'yun',
}

# Ordinary 'i' written alone ('yi'); kept apart because the chart key 'i' is
# shared with the apical row, which has no standalone form
ORDINARY_I_STANDALONE = 'yi'

# Contracted spellings used when an initial precedes the final
DISPLAY_FINAL_MAP: Dict[str, str] = {
    'iou': 'iu',
    'uei': 'ui',
    'uen': 'un',
}

# ü-family finals and their de-umlauted spelling after j/q/x
PALATAL_SPELLING_MAP: Dict[str, str] = {
    'ü': 'u',
    'üe': 'ue',
    'üan': 'uan',
    'ün': 'un',
}

# Orthographic stand-ins redirected to the ü family before rule lookup
PALATAL_VOWEL_SHIFT: Dict[str, str] = {
    'u': 'ü',
    'un': 'ün',
    'uan': 'üan',
}


# ============================================================================
# VALID COMBINATIONS (extracted from the Yoyo table)
# ============================================================================

_VALID_COMBINATION_ROWS: List[List[str]] = [
    # Special i row (z/c/s/zh/ch/sh/r + i)
    ['zi', 'ci', 'si', 'zhi', 'chi', 'shi', 'ri'],
    # a row
    ['a', 'ba', 'pa', 'ma', 'fa', 'da', 'ta', 'na', 'la', 'ga', 'ka', 'ha',
     'za', 'ca', 'sa', 'zha', 'cha', 'sha'],
    # ai row
    ['ai', 'bai', 'pai', 'mai', 'dai', 'tai', 'nai', 'lai', 'gai', 'kai', 'hai',
     'zai', 'cai', 'sai', 'zhai', 'chai', 'shai'],
    # an row
    ['an', 'ban', 'pan', 'man', 'fan', 'dan', 'tan', 'nan', 'lan', 'gan', 'kan',
     'han', 'zan', 'can', 'san', 'zhan', 'chan', 'shan', 'ran'],
    # ang row
    ['ang', 'bang', 'pang', 'mang', 'fang', 'dang', 'tang', 'nang', 'lang',
     'gang', 'kang', 'hang', 'zang', 'cang', 'sang', 'zhang', 'chang', 'shang',
     'rang'],
    # ao row
    ['ao', 'bao', 'pao', 'mao', 'dao', 'tao', 'nao', 'lao', 'gao', 'kao', 'hao',
     'zao', 'cao', 'sao', 'zhao', 'chao', 'shao', 'rao'],
    # e row
    ['e', 'me', 'de', 'te', 'ne', 'le', 'ge', 'ke', 'he', 'ze', 'ce', 'se',
     'zhe', 'che', 'she', 're'],
    # ei row
    ['ei', 'bei', 'pei', 'mei', 'fei', 'dei', 'nei', 'lei', 'gei', 'hei', 'zei',
     'zhei', 'shei'],
    # en row
    ['en', 'ben', 'pen', 'men', 'fen', 'nen', 'gen', 'ken', 'hen', 'zen', 'cen',
     'sen', 'zhen', 'chen', 'shen', 'ren'],
    # eng row
    ['eng', 'beng', 'peng', 'meng', 'feng', 'deng', 'teng', 'neng', 'leng',
     'geng', 'keng', 'heng', 'zeng', 'ceng', 'seng', 'zheng', 'cheng', 'sheng',
     'reng'],
    # er row
    ['er'],
    # i row (normal)
    ['yi', 'bi', 'pi', 'mi', 'di', 'ti', 'ni', 'li', 'ji', 'qi', 'xi'],
    # ia row
    ['ya', 'dia', 'lia', 'jia', 'qia', 'xia'],
    # ian row
    ['yan', 'bian', 'pian', 'mian', 'dian', 'tian', 'nian', 'lian', 'jian',
     'qian', 'xian'],
    # iang row
    ['yang', 'niang', 'liang', 'jiang', 'qiang', 'xiang'],
    # iao row
    ['yao', 'biao', 'piao', 'miao', 'diao', 'tiao', 'niao', 'liao', 'jiao',
     'qiao', 'xiao'],
    # ie row
    ['ye', 'bie', 'pie', 'mie', 'die', 'tie', 'nie', 'lie', 'jie', 'qie', 'xie'],
    # in row
    ['yin', 'bin', 'pin', 'min', 'nin', 'lin', 'jin', 'qin', 'xin'],
    # ing row
    ['ying', 'bing', 'ping', 'ming', 'ding', 'ting', 'ning', 'ling', 'jing',
     'qing', 'xing'],
    # iong row
    ['yong', 'jiong', 'qiong', 'xiong'],
    # iou row (displayed as iu)
    ['you', 'miu', 'diu', 'niu', 'liu', 'jiu', 'qiu', 'xiu'],
    # o row
    ['o', 'bo', 'po', 'mo', 'fo'],
    # ong row
    ['dong', 'tong', 'nong', 'long', 'gong', 'kong', 'hong', 'zong', 'cong',
     'song', 'zhong', 'chong', 'rong'],
    # ou row
    ['ou', 'pou', 'mou', 'fou', 'dou', 'tou', 'lou', 'gou', 'kou', 'hou', 'zou',
     'cou', 'sou', 'zhou', 'chou', 'shou', 'rou'],
    # u row
    ['wu', 'bu', 'pu', 'mu', 'fu', 'du', 'tu', 'nu', 'lu', 'gu', 'ku', 'hu',
     'zu', 'cu', 'su', 'zhu', 'chu', 'shu', 'ru'],
    # ua row
    ['wa', 'gua', 'kua', 'hua', 'zhua', 'shua'],
    # uai row
    ['wai', 'guai', 'kuai', 'huai', 'zhuai', 'chuai', 'shuai'],
    # uan row
    ['wan', 'duan', 'tuan', 'nuan', 'luan', 'guan', 'kuan', 'huan', 'zuan',
     'cuan', 'suan', 'zhuan', 'chuan', 'shuan', 'ruan'],
    # uang row
    ['wang', 'guang', 'kuang', 'huang', 'zhuang', 'chuang', 'shuang'],
    # uei row (displayed as ui)
    ['wei', 'dui', 'tui', 'gui', 'kui', 'hui', 'zui', 'cui', 'sui', 'zhui',
     'chui', 'shui', 'rui'],
    # uen row (displayed as un)
    ['wen', 'dun', 'tun', 'lun', 'gun', 'kun', 'hun', 'zun', 'cun', 'sun',
     'zhun', 'chun', 'shun', 'run'],
    # ueng row
    ['weng'],
    # uo row
    ['wo', 'duo', 'tuo', 'nuo', 'luo', 'guo', 'kuo', 'huo', 'zuo', 'cuo', 'suo',
     'zhuo', 'chuo', 'shuo', 'ruo'],
    # ü row
    ['yu', 'nü', 'lü', 'ju', 'qu', 'xu'],
    # üan row
    ['yuan', 'juan', 'quan', 'xuan'],
    # üe row
    ['yue', 'nüe', 'lüe', 'jue', 'que', 'xue'],
    # ün row
    ['yun', 'jun', 'qun', 'xun'],
]

VALID_COMBINATIONS: FrozenSet[str] = frozenset(
    spelling for row in _VALID_COMBINATION_ROWS for spelling in row
)


# ============================================================================
# HELPER FUNCTIONS
# ============================================================================

def is_known_initial(symbol: str) -> bool:
    """Return True if the symbol is one of the 21 chart initials."""
    return symbol in _INITIAL_SET


def is_known_final(symbol: str) -> bool:
    """Return True if the symbol is one of the chart finals."""
    return symbol in _FINAL_SET


def row_index_of(final: str, row_context: Optional[RowContext] = None) -> int:
    """
    Chart row index of a final.

    Args:
        final: Final symbol (e.g. "ang")
        row_context: Which 'i' row is meant when final is 'i'

    Returns:
        Row index in FINALS, or -1 for an unknown final
    """
    if final == 'i':
        if row_context == RowContext.APICAL:
            return APICAL_ROW_INDEX
        return ORDINARY_I_ROW_INDEX
    if final not in _FINAL_SET:
        return -1
    return FINALS.index(final)


_INITIAL_SET: FrozenSet[str] = frozenset(INITIALS)
_FINAL_SET: FrozenSet[str] = frozenset(FINALS)
