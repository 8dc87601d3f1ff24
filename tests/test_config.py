#!/usr/bin/env python3
"""Unit tests for report settings loading."""

import tempfile
from pathlib import Path
from unittest import TestCase, main

from pydantic import ValidationError

from healthcheck.config import ConfigError, ConfigLoader, ReportSettings
from healthcheck.config.defaults import DEFAULT_BADGE_LABEL, DEFAULT_TOP_FIXES

from support import write


class TestReportSettings(TestCase):
    def test_defaults(self):
        settings = ReportSettings()
        self.assertEqual(settings.top_fixes, DEFAULT_TOP_FIXES)
        self.assertEqual(settings.badge_label, DEFAULT_BADGE_LABEL)
        self.assertTrue(settings.color)

    def test_blank_label_rejected(self):
        with self.assertRaises(ValidationError):
            ReportSettings(badge_label="   ")

    def test_unknown_key_rejected(self):
        with self.assertRaises(ValidationError):
            ReportSettings(weights={"safety": 50})

    def test_frozen(self):
        with self.assertRaises(ValidationError):
            ReportSettings().top_fixes = 3


class TestConfigLoader(TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name)

    def tearDown(self):
        self._tmp.cleanup()

    def test_bare_mapping(self):
        path = write(self.root / "a.yaml", "top_fixes: 3\nbar_width: 10\n")
        report = ConfigLoader(path).load().report
        self.assertEqual((report.top_fixes, report.bar_width), (3, 10))

    def test_nested_under_report(self):
        path = write(self.root / "a.yaml", "report:\n  badge_label: Setup\n")
        self.assertEqual(ConfigLoader(path).load().report.badge_label, "Setup")

    def test_empty_file_gives_defaults(self):
        path = write(self.root / "a.yaml", "")
        self.assertEqual(ConfigLoader(path).load().report, ReportSettings())

    def test_missing_file(self):
        with self.assertRaises(ConfigError):
            ConfigLoader(self.root / "missing.yaml").load()

    def test_no_path(self):
        with self.assertRaises(ConfigError):
            ConfigLoader().load()

    def test_invalid_yaml(self):
        path = write(self.root / "a.yaml", "top_fixes: [1, 2\n")
        with self.assertRaises(ConfigError):
            ConfigLoader(path).load()

    def test_invalid_utf8(self):
        path = self.root / "a.yaml"
        path.write_bytes(b"top_fixes: \xff\xfe\n")
        with self.assertRaises(ConfigError):
            ConfigLoader(path).load()

    def test_directory_instead_of_file(self):
        with self.assertRaises(ConfigError):
            ConfigLoader(self.root).load()

    def test_top_level_list(self):
        path = write(self.root / "a.yaml", "- 1\n- 2\n")
        with self.assertRaises(ConfigError):
            ConfigLoader(path).load()

    def test_invalid_values(self):
        path = write(self.root / "a.yaml", "bar_width: 500\n")
        with self.assertRaises(ConfigError):
            ConfigLoader(path).load()

    def test_report_not_a_mapping(self):
        path = write(self.root / "a.yaml", "report: 5\n")
        with self.assertRaises(ConfigError):
            ConfigLoader(path).load()

    def test_from_dict(self):
        self.assertEqual(ConfigLoader.from_dict({"top_fixes": 2}).report.top_fixes, 2)
        self.assertEqual(ConfigLoader.from_dict().report, ReportSettings())


if __name__ == "__main__":
    main()
