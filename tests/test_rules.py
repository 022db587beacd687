import json
import os
import tempfile
import unittest

from pinyin_chart import get_phonetic
from pinyin_chart.schema.constants import FINALS, INITIALS
from pinyin_chart.schema.rules import (
    FinalRule,
    InitialRule,
    RuleTable,
    build_urdu_rule_table,
    get_rule_table,
    load_rule_table,
    set_rule_table,
)


class TestRuleRecords(unittest.TestCase):

    def test_initial_tone4_override(self):
        rule = InitialRule(base='پ', tone4_override='بھ')
        self.assertEqual(rule.text_for(4), 'بھ')
        self.assertEqual(rule.text_for(1), 'پ')
        self.assertEqual(rule.text_for(None), 'پ')
        self.assertEqual(InitialRule(base='ف').text_for(4), 'ف')

    def test_final_tone_variants(self):
        rule = FinalRule(base='او', tone1='آو', tone3='َوء')
        self.assertEqual(rule.text_for(1), 'آو')
        self.assertEqual(rule.text_for(2), 'او')
        self.assertEqual(rule.text_for(3), 'َوء')
        self.assertEqual(rule.text_for(None), 'او')

    def test_records_are_frozen(self):
        rule = InitialRule(base='پ')
        with self.assertRaises(Exception):
            rule.base = 'ب'


class TestRuleTable(unittest.TestCase):

    def test_urdu_table_covers_the_chart(self):
        table = get_rule_table()
        self.assertEqual(set(table.initials), set(INITIALS))
        self.assertTrue(set(FINALS) <= set(table.finals))
        self.assertIn('ue', table.finals)
        self.assertEqual(table.final('ue').base, table.final('üe').base)

    def test_table_is_shared_and_read_only(self):
        self.assertIs(get_rule_table(), get_rule_table())
        with self.assertRaises(TypeError):
            get_rule_table().initials['y'] = InitialRule(base='ی')

    def test_dict_round_trip(self):
        table = build_urdu_rule_table()
        rebuilt = RuleTable.from_dict(table.to_dict())
        self.assertEqual(dict(rebuilt.initials), dict(table.initials))
        self.assertEqual(dict(rebuilt.finals), dict(table.finals))

    def test_swap_whole_table(self):
        replacement = RuleTable(
            initials={'b': InitialRule(base='ب')},
            finals={'a': FinalRule(base='ا')},
        )
        previous = set_rule_table(replacement)
        try:
            self.assertEqual(get_phonetic('b', 'a'), 'با')
            self.assertEqual(get_phonetic('p', 'a'), '')
        finally:
            set_rule_table(previous)
        self.assertEqual(get_phonetic('b', 'a', tone=1), 'پآ')

    def test_load_rule_table(self):
        data = {"initials": {"b": {"base": "ب"}}, "finals": {"a": {"base": "ا", "tone1": "آ"}}}
        fd, path = tempfile.mkstemp(suffix='.json')
        try:
            with os.fdopen(fd, 'w', encoding='utf-8') as f:
                json.dump(data, f, ensure_ascii=False)
            table = load_rule_table(path)
        finally:
            os.remove(path)
        self.assertEqual(table.final('a').text_for(1), 'آ')
        self.assertIsNone(table.initial('p'))


if __name__ == '__main__':
    unittest.main()
