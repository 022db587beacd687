import unittest

from pinyin_chart import get_tones
from pinyin_chart.utils.pinyin_utils import (
    audio_name,
    extract_tone,
    normalize_tone,
    numbered_to_marked,
    strip_tones,
)


class TestGetTones(unittest.TestCase):

    def test_a_takes_the_mark(self):
        self.assertEqual(get_tones('ma'), ['mā', 'má', 'mǎ', 'mà', 'ma'])
        self.assertEqual(get_tones('guai')[3], 'guài')

    def test_e_before_other_vowels(self):
        self.assertEqual(get_tones('xue')[1], 'xué')
        self.assertEqual(get_tones('mei')[2], 'měi')

    def test_o_of_ou(self):
        self.assertEqual(get_tones('gou')[0], 'gōu')

    def test_right_most_vowel(self):
        self.assertEqual(get_tones('shui'), ['shuī', 'shuí', 'shuǐ', 'shuì', 'shui'])
        self.assertEqual(get_tones('liu')[1], 'liú')
        self.assertEqual(get_tones('xiong')[0], 'xiōng')

    def test_umlaut_and_v(self):
        self.assertEqual(get_tones('lü')[2], 'lǚ')
        self.assertEqual(get_tones('lv')[2], 'lǚ')

    def test_no_vowel(self):
        self.assertEqual(get_tones('m'), ['m'] * 5)
        self.assertEqual(get_tones(''), [''] * 5)


class TestToneHelpers(unittest.TestCase):

    def test_normalize_tone(self):
        self.assertEqual(normalize_tone(3), 3)
        self.assertEqual(normalize_tone('4'), 4)
        self.assertEqual(normalize_tone(' 1 '), 1)
        for tone in (None, 0, 5, '5', 'abc', 7, -1, True):
            with self.subTest(tone=tone):
                self.assertIsNone(normalize_tone(tone))

    def test_extract_tone(self):
        self.assertEqual(extract_tone('zhuàng'), ('zhuang', 4))
        self.assertEqual(extract_tone('mā'), ('ma', 1))
        self.assertEqual(extract_tone('zhong1'), ('zhong', 1))
        self.assertEqual(extract_tone('ma5'), ('ma', None))
        self.assertEqual(extract_tone('lǚ'), ('lü', 3))
        self.assertEqual(extract_tone('lü'), ('lü', None))

    def test_strip_tones(self):
        self.assertEqual(strip_tones('lǚ xíng'), 'lü xing')
        self.assertEqual(strip_tones(''), '')

    def test_numbered_to_marked(self):
        self.assertEqual(numbered_to_marked('lv3'), 'lǚ')
        self.assertEqual(numbered_to_marked('hao3'), 'hǎo')
        self.assertEqual(numbered_to_marked('ma5'), 'ma')
        self.assertEqual(numbered_to_marked('liu2'), 'liú')

    def test_audio_name(self):
        self.assertEqual(audio_name('lü', 3), 'lv3')
        self.assertEqual(audio_name('ba', 1), 'ba1')


if __name__ == '__main__':
    unittest.main()
