import os
import sys
import unittest
from unittest.mock import patch

from pydantic import ValidationError

# Add src to the path so we can import localctx modules
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "../src")))

from localctx.core.config import DEFAULT_MODEL, ContextSettings, load_settings
from localctx.file_utils import DEFAULT_CONTEXT_DIR


class TestLoadSettings(unittest.TestCase):
    """Tests for building settings from the environment"""

    def test_defaults(self) -> None:
        settings = load_settings(env={})
        self.assertEqual(settings.context.context_dir, DEFAULT_CONTEXT_DIR)
        self.assertEqual(settings.context.context_file_name, "context.md")
        self.assertEqual(settings.context.images_dir_name, "images")
        self.assertFalse(settings.context.enabled_by_default)
        self.assertEqual(settings.model, DEFAULT_MODEL)
        self.assertIsNone(settings.api_key)

    def test_paths_derive_from_root(self) -> None:
        settings = load_settings(env={
            "LOCALCTX_CONTEXT_DIR": "/tmp/store",
            "LOCALCTX_CONTEXT_FILE": "notes.md",
            "LOCALCTX_IMAGES_DIR": "pics",
        })
        self.assertEqual(settings.context.context_file_path, os.path.join("/tmp/store", "notes.md"))
        self.assertEqual(settings.context.images_dir_path, os.path.join("/tmp/store", "pics"))

    def test_overrides_win_over_env(self) -> None:
        settings = load_settings(
            env={"LOCALCTX_CONTEXT_DIR": "/tmp/a", "LOCALCTX_MODEL": "env-model",
                 "LOCALCTX_ENABLE_CONTEXT": "no"},
            context_dir="/tmp/b",
            model="flag-model",
            enable_context=True,
        )
        self.assertEqual(settings.context.context_dir, "/tmp/b")
        self.assertEqual(settings.model, "flag-model")
        self.assertTrue(settings.context.enabled_by_default)

    def test_enable_flag_from_env(self) -> None:
        for value, expected in (("1", True), ("Yes", True), ("on", True), ("0", False), ("off", False)):
            settings = load_settings(env={"LOCALCTX_ENABLE_CONTEXT": value})
            self.assertEqual(settings.context.enabled_by_default, expected, value)

    def test_api_settings(self) -> None:
        settings = load_settings(env={"OPENAI_API_KEY": "sk-test", "OPENAI_BASE_URL": "http://localhost:1234/v1"})
        self.assertEqual(settings.api_key, "sk-test")
        self.assertEqual(settings.base_url, "http://localhost:1234/v1")

    def test_home_is_expanded(self) -> None:
        settings = ContextSettings(context_dir="~/ctx")
        self.assertEqual(settings.context_dir, os.path.join(os.path.expanduser("~"), "ctx"))

    def test_rejects_nested_file_name(self) -> None:
        with self.assertRaises(ValidationError):
            ContextSettings(context_file_name=os.path.join("a", "b.md"))
        with self.assertRaises(ValidationError):
            ContextSettings(context_dir="  ")

    def test_rejects_alternate_separator(self) -> None:
        with patch("localctx.core.config.os.altsep", "/"), patch("localctx.core.config.os.sep", "\\"):
            with self.assertRaises(ValidationError):
                ContextSettings(images_dir_name="a/b")
            with self.assertRaises(ValidationError):
                ContextSettings(context_file_name="a\\b.md")
            self.assertEqual(ContextSettings(context_file_name="notes.md").context_file_name, "notes.md")


if __name__ == "__main__":
    unittest.main()
