import unittest

from fedbankday.holidays import (
    FED_HOLIDAYS,
    HOLIDAYS_BY_MONTH,
    HolidayRule,
    HolidayRuleError,
    build_holiday_index,
    rules_for_month,
    validate_rules,
)


class HolidayTableTests(unittest.TestCase):
    def test_table_has_eleven_unique_holidays(self) -> None:
        names = [rule.name for rule in FED_HOLIDAYS]
        self.assertEqual(len(names), 11)
        self.assertEqual(len(set(names)), 11)

    def test_index_groups_by_month_in_table_order(self) -> None:
        self.assertEqual(
            [rule.name for rule in rules_for_month(11)],
            ["Veteran's Day", "Thanksgiving Day"],
        )
        self.assertEqual(
            [rule.name for rule in rules_for_month(1)],
            ["New Year's Day", "Birthday of Martin Luther King Jr."],
        )
        self.assertEqual(rules_for_month(3), ())
        self.assertEqual(sorted(HOLIDAYS_BY_MONTH), [1, 2, 5, 6, 7, 9, 10, 11, 12])

    def test_index_is_read_only(self) -> None:
        with self.assertRaises(TypeError):
            HOLIDAYS_BY_MONTH[3] = ()  # type: ignore[index]

    def test_floating_rules(self) -> None:
        memorial = next(rule for rule in FED_HOLIDAYS if rule.name == "Memorial Day")
        self.assertTrue(memorial.is_floating)
        self.assertEqual((memorial.weekday, memorial.nth), (0, -1))
        july4 = next(rule for rule in FED_HOLIDAYS if rule.name == "Independence Day")
        self.assertFalse(july4.is_floating)
        self.assertEqual((july4.month, july4.day), (7, 4))


class HolidayValidationTests(unittest.TestCase):
    def test_rejects_fifth_weekday(self) -> None:
        with self.assertRaises(HolidayRuleError):
            validate_rules([HolidayRule("Fifth Friday", 1, weekday=4, nth=5)])

    def test_rejects_zero_nth(self) -> None:
        with self.assertRaises(HolidayRuleError):
            validate_rules([HolidayRule("Zeroth Monday", 1, weekday=0, nth=0)])

    def test_rejects_bad_month_weekday_and_day(self) -> None:
        bad = [
            HolidayRule("Month 13", 13, day=1),
            HolidayRule("Weekday 7", 1, weekday=7, nth=1),
            HolidayRule("Leap Day", 2, day=29),
            HolidayRule("April 31", 4, day=31),
            HolidayRule("Empty", 1),
            HolidayRule("Both", 1, day=1, weekday=0, nth=1),
            HolidayRule("Nth only", 1, day=1, nth=2),
        ]
        for rule in bad:
            with self.subTest(rule=rule.name):
                with self.assertRaises(HolidayRuleError):
                    validate_rules([rule])

    def test_rejects_duplicate_names(self) -> None:
        with self.assertRaises(HolidayRuleError):
            build_holiday_index([HolidayRule("Dup", 1, day=1), HolidayRule("Dup", 2, day=2)])

    def test_error_is_a_value_error(self) -> None:
        self.assertTrue(issubclass(HolidayRuleError, ValueError))


if __name__ == "__main__":
    unittest.main()
