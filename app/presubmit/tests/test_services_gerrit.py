from __future__ import annotations

from django.test import SimpleTestCase

from presubmit.services import MalformedRefError, format_cl_string, parse_ref_string


class ParseRefStringTests(SimpleTestCase):
    def test_parses_change_and_patchset(self):
        self.assertEqual(parse_ref_string("refs/changes/34/1234/5"), (1234, 5))

    def test_wrong_number_of_parts(self):
        with self.assertRaises(MalformedRefError) as cm:
            parse_ref_string("refs/changes/1234/5")
        self.assertIn("expected 5, got 4", str(cm.exception))

    def test_not_a_change_ref(self):
        with self.assertRaises(MalformedRefError):
            parse_ref_string("refs/heads/34/1234/5")

    def test_non_integer_parts(self):
        for ref in ("refs/changes/34/abc/5", "refs/changes/34/1234/x"):
            with self.subTest(ref=ref):
                with self.assertRaises(MalformedRefError):
                    parse_ref_string(ref)

    def test_non_positive_numbers(self):
        for ref in ("refs/changes/00/0/1", "refs/changes/34/1234/0", "refs/changes/34/-3/2"):
            with self.subTest(ref=ref):
                with self.assertRaises(MalformedRefError):
                    parse_ref_string(ref)

    def test_malformed_ref_is_value_error(self):
        with self.assertRaises(ValueError):
            parse_ref_string("garbage")


class FormatClStringTests(SimpleTestCase):
    def test_format(self):
        self.assertEqual(format_cl_string(1234, 5), "1234/5")
