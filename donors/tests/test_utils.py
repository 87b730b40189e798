from django.test import SimpleTestCase

from donors.utils import (
    clean_display_location,
    format_phone_display,
    is_valid_phone,
    normalize_location,
    normalize_phone_digits,
    sanitize_location,
    sanitize_name,
)


class LocationTests(SimpleTestCase):
    def test_normalize_location(self):
        self.assertEqual(normalize_location('Toronto, ON'), 'toronto, on')
        self.assertEqual(normalize_location('  New York  '), 'new york')

    def test_clean_display_location(self):
        self.assertEqual(clean_display_location('  Toronto,  ON  '), 'Toronto, ON')


class PhoneTests(SimpleTestCase):
    def test_normalize_phone_digits(self):
        self.assertEqual(normalize_phone_digits('+1 (416) 555-0123'), '14165550123')
        self.assertEqual(normalize_phone_digits('416.555.0123'), '4165550123')

    def test_format_phone_display(self):
        self.assertEqual(format_phone_display('4165550123'), '+1 416-555-0123')
        self.assertEqual(format_phone_display('+1 (416) 555-0123'), '+1 416-555-0123')
        self.assertEqual(format_phone_display('+91 98765 43210'), '+91 98765 43210')
        self.assertEqual(format_phone_display('+44 20 7946 0958'), '+44 20 7946 0958')

    def test_format_phone_display_falls_back_to_raw_input(self):
        self.assertEqual(format_phone_display('abc'), 'abc')

    def test_is_valid_phone(self):
        self.assertTrue(is_valid_phone('+1 416 555 0123'))
        self.assertFalse(is_valid_phone('4165550123'))
        self.assertFalse(is_valid_phone('+123'))


class SanitizeTests(SimpleTestCase):
    def test_sanitize_location(self):
        self.assertEqual(sanitize_location('Toronto, ON'), 'Toronto, ON')
        self.assertEqual(sanitize_location("<b>St. John's</b>"), 'bSt. Johnsb')

    def test_sanitize_name(self):
        self.assertEqual(sanitize_name("John O'Brien"), "John O'Brien")
        self.assertEqual(sanitize_name('John<script>'), 'Johnscript')
