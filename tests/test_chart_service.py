import unittest

from pinyin_chart.schema.constants import FINALS, INITIALS, ORDINARY_I_ROW_INDEX
from pinyin_chart.services.chart_service import (
    build_chart,
    build_header_row,
    build_tone_popover,
)


class TestChartService(unittest.TestCase):

    @classmethod
    def setUpClass(cls):
        cls.rows = build_chart()

    def test_header_row(self):
        header = build_header_row()
        self.assertEqual([h['initial'] for h in header], INITIALS)
        self.assertEqual(header[0], {'initial': 'b', 'phonetic': 'پ'})

    def test_shape(self):
        self.assertEqual(len(self.rows), len(FINALS))
        for row in self.rows:
            with self.subTest(final=row['final'], row=row['row_index']):
                self.assertEqual(len(row['cells']), len(INITIALS))
                self.assertEqual(row['header'], f"-{row['final']}")

    def test_two_i_rows(self):
        apical = self.rows[0]
        ordinary = self.rows[ORDINARY_I_ROW_INDEX]
        zh = INITIALS.index('zh')
        b = INITIALS.index('b')

        self.assertEqual(apical['row_context'], 'apical')
        self.assertEqual(apical['cells'][zh]['pinyin'], 'zhi')
        self.assertIsNone(apical['cells'][b])
        self.assertIsNone(apical['standalone'])
        self.assertEqual(apical['standalone_phonetic'], '')

        self.assertEqual(ordinary['row_context'], 'ordinary')
        self.assertEqual(ordinary['cells'][b]['pinyin'], 'bi')
        self.assertIsNone(ordinary['cells'][zh])
        self.assertEqual(ordinary['standalone'], 'yi')
        self.assertEqual(ordinary['standalone_phonetic'], 'اِی')

    def test_cells(self):
        a_row = self.rows[FINALS.index('a')]
        self.assertEqual(a_row['phonetic'], 'آ')
        self.assertEqual(a_row['standalone'], 'a')
        self.assertEqual(a_row['cells'][0], {
            'initial': 'b', 'final': 'a', 'pinyin': 'ba', 'phonetic': 'پآ',
        })
        iou_row = self.rows[FINALS.index('iou')]
        self.assertEqual(iou_row['cells'][INITIALS.index('l')]['pinyin'], 'liu')

    def test_separated_mode(self):
        rows = build_chart(display_mode='separated', tone=1)
        e_row = rows[FINALS.index('e')]
        self.assertEqual(e_row['cells'][INITIALS.index('m')]['phonetic'], 'م + ـَ')

    def test_tone_popover(self):
        popover = build_tone_popover('l', 'ü')
        self.assertEqual(popover['pinyin'], 'lü')
        self.assertEqual([t['tone'] for t in popover['tones']], [1, 2, 3, 4])
        third = popover['tones'][2]
        self.assertEqual(third['pinyin'], 'lǚ')
        self.assertEqual(third['audio_name'], 'lv3')
        self.assertEqual(popover['tones'][3]['phonetic'], 'لھُ')

    def test_popover_for_missing_syllable(self):
        self.assertIsNone(build_tone_popover('f', 'ong'))


if __name__ == '__main__':
    unittest.main()
