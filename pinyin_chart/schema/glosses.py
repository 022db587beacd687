"""
Short English glosses for common characters, shown next to each character
on practice sheets. Characters outside this table have no gloss.
"""

from typing import Dict

CHAR_GLOSSES: Dict[str, str] = {
    '我': 'I, me', '你': 'you', '他': 'he', '她': 'she', '它': 'it',
    '们': '(plural)', '的': "'s, of", '是': 'is, am', '不': 'not', '有': 'have',
    '在': 'at, in', '这': 'this', '那': 'that', '什': 'what', '么': '(question)',
    '好': 'good', '大': 'big', '小': 'small', '多': 'many', '少': 'few',
    '一': 'one', '二': 'two', '三': 'three', '四': 'four', '五': 'five',
    '六': 'six', '七': 'seven', '八': 'eight', '九': 'nine', '十': 'ten',
    '百': 'hundred', '千': 'thousand', '万': '10,000', '年': 'year', '月': 'month',
    '日': 'day, sun', '时': 'time, hour', '分': 'minute', '天': 'day, sky', '地': 'earth',
    '人': 'person', '中': 'middle', '国': 'country', '家': 'home', '学': 'study',
    '生': 'life, born', '老': 'old', '师': 'teacher', '朋': 'friend', '友': 'friend',
    '爱': 'love', '心': 'heart', '想': 'think', '看': 'look', '见': 'see',
    '听': 'listen', '说': 'speak', '读': 'read', '写': 'write', '吃': 'eat',
    '喝': 'drink', '走': 'walk', '来': 'come', '去': 'go', '做': 'do',
    '买': 'buy', '卖': 'sell', '给': 'give', '要': 'want', '能': 'can',
    '会': 'can, will', '可': 'may', '以': 'with', '和': 'and', '或': 'or',
    '但': 'but', '因': 'because', '为': 'for', '所': 'so', '就': 'then',
    '只': 'only', '很': 'very', '太': 'too', '最': 'most', '更': 'more',
    '还': 'still', '又': 'again', '也': 'also', '都': 'all', '每': 'every',
    '上': 'up', '下': 'down', '左': 'left', '右': 'right', '前': 'front',
    '后': 'back', '里': 'inside', '外': 'outside', '东': 'east', '西': 'west',
    '南': 'south', '北': 'north', '水': 'water', '火': 'fire', '山': 'mountain',
    '花': 'flower', '树': 'tree', '鱼': 'fish', '鸟': 'bird', '狗': 'dog',
    '猫': 'cat', '马': 'horse', '牛': 'cow', '羊': 'sheep', '猪': 'pig',
    '红': 'red', '蓝': 'blue', '绿': 'green', '黄': 'yellow', '白': 'white',
    '黑': 'black', '世': 'world', '界': 'boundary', '电': 'electric', '话': 'speech',
    '手': 'hand', '机': 'machine', '头': 'head', '眼': 'eye', '口': 'mouth',
    '耳': 'ear', '鼻': 'nose', '脸': 'face', '身': 'body', '腿': 'leg',
    '脚': 'foot', '男': 'male', '女': 'female', '孩': 'child', '子': 'child',
    '父': 'father', '母': 'mother', '哥': 'brother', '姐': 'sister', '弟': 'brother',
    '妹': 'sister', '车': 'car', '路': 'road', '门': 'door', '窗': 'window',
    '书': 'book', '本': 'book', '笔': 'pen', '纸': 'paper', '字': 'character',
    '画': 'draw', '歌': 'song', '舞': 'dance', '高': 'tall', '低': 'low',
    '长': 'long', '短': 'short', '新': 'new', '旧': 'old', '快': 'fast',
    '慢': 'slow', '早': 'early', '晚': 'late', '今': 'today', '明': 'tomorrow',
    '昨': 'yesterday', '请': 'please', '谢': 'thanks', '对': 'correct', '错': 'wrong',
    '开': 'open', '关': 'close', '起': 'rise', '床': 'bed', '睡': 'sleep',
    '觉': 'feel', '饭': 'rice', '菜': 'vegetable', '肉': 'meat', '面': 'noodle',
    '茶': 'tea', '酒': 'wine', '钱': 'money', '块': 'piece', '元': 'yuan',
}


def get_gloss(char: str) -> str:
    """English gloss of one character, or "" when it has none."""
    return CHAR_GLOSSES.get(char, "")
