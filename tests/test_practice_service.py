import unittest

from pinyin_chart.schema.glosses import get_gloss
from pinyin_chart.services.practice_service import annotate_text, char_pinyin, is_han


class TestPracticeService(unittest.TestCase):

    def test_annotate(self):
        result = annotate_text('你好')
        self.assertEqual([r['char'] for r in result], ['你', '好'])
        self.assertEqual([r['pinyin'] for r in result], ['nǐ', 'hǎo'])
        self.assertEqual(result[0]['phonetic'], 'نِ')
        self.assertEqual(result[1]['phonetic'], 'خاؤء')

    def test_non_han_passes_through(self):
        result = annotate_text('A,好')
        self.assertEqual(result[0], {'char': 'A', 'pinyin': '', 'phonetic': '', 'meaning': ''})
        self.assertEqual(result[1], {'char': ',', 'pinyin': '', 'phonetic': '', 'meaning': ''})
        self.assertEqual(result[2]['pinyin'], 'hǎo')

    def test_meaning(self):
        result = annotate_text('你好女龙')
        self.assertEqual([r['meaning'] for r in result], ['you', 'good', 'female', ''])
        # an unglossed character still gets its reading
        self.assertEqual(result[3]['pinyin'], 'lóng')
        self.assertEqual(get_gloss('的'), "'s, of")
        self.assertEqual(get_gloss('A'), '')

    def test_standalone_syllable(self):
        result = annotate_text('爱')
        self.assertEqual(result[0]['pinyin'], 'ài')
        self.assertEqual(result[0]['phonetic'], 'آئے')

    def test_umlaut_reading(self):
        self.assertEqual(char_pinyin('女'), 'nv3')
        self.assertEqual(annotate_text('女')[0]['pinyin'], 'nǚ')

    def test_separated_mode(self):
        self.assertEqual(annotate_text('好', display_mode='separated')[0]['phonetic'], 'خ + اؤء')

    def test_empty(self):
        self.assertEqual(annotate_text(''), [])
        self.assertFalse(is_han('a'))
        self.assertTrue(is_han('中'))


if __name__ == '__main__':
    unittest.main()
