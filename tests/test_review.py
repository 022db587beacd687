import json
import os
import tempfile
import unittest

from pinyin_chart.database.db import get_test_db
from pinyin_chart.database.services import ReviewChoiceService
from pinyin_chart.schema.constants import FINALS
from pinyin_chart.services.phonetic import get_baseline_phonetic
from pinyin_chart.services.review_service import (
    MISSING_VALUE,
    build_review_rows,
    generate_baseline,
    load_baseline,
    paginate,
    parse_review_key,
)


class TestReviewRows(unittest.TestCase):

    @classmethod
    def setUpClass(cls):
        cls.baseline = generate_baseline()

    def test_baseline_covers_every_combination(self):
        self.assertEqual(len(self.baseline), 21 * len(set(FINALS)) * 4)
        # both i rows share the b-i-* and zh-i-* style keys
        self.assertIn('zh-i-3', self.baseline)
        self.assertIn('b-i-3', self.baseline)
        self.assertEqual(self.baseline['b-a-1'], 'پآ')
        self.assertEqual(self.baseline['b-a-2'], self.baseline['b-a-1'])
        self.assertEqual(self.baseline['b-a-3'], self.baseline['b-a-1'])
        self.assertEqual(self.baseline['b-a-4'], get_baseline_phonetic('b', 'a', 4))
        self.assertNotEqual(self.baseline['b-a-4'], self.baseline['b-a-1'])

    def test_empty_baseline_shows_missing(self):
        rows = build_review_rows({}, diff_only=True)
        self.assertTrue(rows)
        self.assertTrue(all(row['old_value'] == MISSING_VALUE for row in rows))
        self.assertEqual(len(rows), len(build_review_rows({}, diff_only=False)))

    def test_diff_only_keeps_exception_changes(self):
        keys = {row['key'] for row in build_review_rows(self.baseline, diff_only=True)}
        self.assertIn('d-ou-1', keys)
        self.assertIn('f-en-1', keys)
        self.assertIn('g-en-1', keys)
        self.assertNotIn('d-en-1', keys)
        self.assertIn('zh-i-3', keys)
        self.assertNotIn('b-a-1', keys)
        self.assertNotIn('zh-i-1', keys)

    def test_row_content(self):
        rows = build_review_rows(self.baseline, diff_only=False, query='liu3')
        self.assertEqual(len(rows), 1)
        row = rows[0]
        self.assertEqual(row['key'], 'l-iou-3')
        self.assertEqual((row['initial'], row['final'], row['tone']), ('l', 'iou', 3))
        self.assertEqual(row['old_value'], row['new_value'])

    def test_query_filter(self):
        rows = build_review_rows({}, diff_only=False, query='zhi')
        self.assertEqual([row['pinyin'] for row in rows], ['zhi1', 'zhi2', 'zhi3', 'zhi4'])

    def test_invalid_cells_are_skipped(self):
        keys = [row['key'] for row in build_review_rows({}, diff_only=False)]
        self.assertNotIn('f-ong-1', keys)
        # each 'i' cell shows up once, from its own row
        self.assertEqual(keys.count('b-i-1'), 1)
        self.assertEqual(keys.count('zh-i-1'), 1)


class TestPaginate(unittest.TestCase):

    def test_pages(self):
        rows = [{'key': str(i)} for i in range(1200)]
        page = paginate(rows, 3, 500)
        self.assertEqual(page['total'], 1200)
        self.assertEqual(page['total_pages'], 3)
        self.assertEqual(len(page['rows']), 200)
        self.assertEqual(page['rows'][0]['key'], '1000')

    def test_page_is_clamped(self):
        rows = [{'key': str(i)} for i in range(10)]
        self.assertEqual(paginate(rows, 0, 4)['page'], 1)
        self.assertEqual(paginate(rows, 99, 4)['page'], 3)
        self.assertEqual(paginate([], 1)['total_pages'], 1)


class TestLoadBaseline(unittest.TestCase):

    def _write(self, text):
        fd, path = tempfile.mkstemp(suffix='.json')
        with os.fdopen(fd, 'w', encoding='utf-8') as f:
            f.write(text)
        self.addCleanup(os.remove, path)
        return path

    def test_load(self):
        path = self._write(json.dumps({'b-a-1': 'پآ'}, ensure_ascii=False))
        self.assertEqual(load_baseline(path), {'b-a-1': 'پآ'})

    def test_missing_or_broken_file(self):
        with self.assertLogs('pinyin_chart.services.review_service', level='ERROR'):
            self.assertEqual(load_baseline('/nonexistent/baseline.json'), {})
        with self.assertLogs('pinyin_chart.services.review_service', level='ERROR'):
            self.assertEqual(load_baseline(self._write('{not json')), {})
        self.assertEqual(load_baseline(None), {})


class TestReviewKeys(unittest.TestCase):

    def test_parse_review_key(self):
        self.assertEqual(parse_review_key('zh-i-3'), ('zh', 'i', 3))
        self.assertIsNone(parse_review_key('f-ong-1'))
        self.assertIsNone(parse_review_key('b-a-7'))
        self.assertIsNone(parse_review_key('nonsense'))


class TestReviewChoiceService(unittest.TestCase):

    def setUp(self):
        self.db = get_test_db()

    def tearDown(self):
        self.db.close()

    def test_set_action(self):
        choice = ReviewChoiceService.set_action(self.db, 'zh-i-3', 'old')
        self.assertEqual(choice.action, 'old')
        ReviewChoiceService.set_action(self.db, 'zh-i-3', 'new')
        self.assertEqual(ReviewChoiceService.get_by_key(self.db, 'zh-i-3').action, 'new')
        self.assertEqual(len(ReviewChoiceService.get_all(self.db)), 1)

    def test_invalid_action(self):
        with self.assertRaises(ValueError):
            ReviewChoiceService.set_action(self.db, 'zh-i-3', 'maybe')

    def test_custom_value(self):
        ReviewChoiceService.set_action(self.db, 'd-ou-1', 'old')
        choice = ReviewChoiceService.set_custom_value(self.db, 'd-ou-1', 'تو')
        self.assertEqual(choice.action, 'custom')
        self.assertEqual(choice.custom_value, 'تو')

    def test_export_skips_new(self):
        ReviewChoiceService.set_action(self.db, 'b-a-1', 'new')
        ReviewChoiceService.set_action(self.db, 'zh-i-3', 'old')
        ReviewChoiceService.set_custom_value(self.db, 'd-ou-1', 'تو')
        self.assertEqual(ReviewChoiceService.export(self.db), {
            'd-ou-1': {'action': 'custom', 'custom_value': 'تو'},
            'zh-i-3': {'action': 'old'},
        })

    def test_delete(self):
        ReviewChoiceService.set_action(self.db, 'b-a-1', 'old')
        self.assertTrue(ReviewChoiceService.delete(self.db, 'b-a-1'))
        self.assertFalse(ReviewChoiceService.delete(self.db, 'b-a-1'))


if __name__ == '__main__':
    unittest.main()
