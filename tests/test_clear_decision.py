import os
import sys
import unittest

# Add src to the path so we can import localctx modules
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "../src")))

from localctx.localcontext.clearer import ClearOutcome, ContextStoreState, classify


class TestClassify(unittest.TestCase):
    """Tests for the clear decision on every file/directory combination"""

    def test_both_present_and_empty(self) -> None:
        state = ContextStoreState(file_exists=True, dir_exists=True)
        outcome, message = classify(state, "context.md")
        self.assertEqual(outcome, ClearOutcome.ALREADY_EMPTY)
        self.assertEqual(message, "Local context is already empty. Nothing to clear.")

    def test_file_missing_dir_empty(self) -> None:
        state = ContextStoreState(file_exists=False, dir_exists=True)
        outcome, message = classify(state, "context.md")
        self.assertEqual(outcome, ClearOutcome.INCOMPLETE_BUT_EMPTY)
        self.assertEqual(
            message,
            "Local context is incomplete (missing: context.md file), but there was nothing to clear.",
        )

    def test_dir_missing_file_empty(self) -> None:
        state = ContextStoreState(file_exists=True, dir_exists=False)
        outcome, message = classify(state, "context.md")
        self.assertEqual(outcome, ClearOutcome.INCOMPLETE_BUT_EMPTY)
        self.assertIn("missing: images directory", message)

    def test_both_missing(self) -> None:
        outcome, message = classify(ContextStoreState(), "context.md")
        self.assertEqual(outcome, ClearOutcome.INCOMPLETE_BUT_EMPTY)
        self.assertIn("missing: context.md file and images directory", message)

    def test_file_with_content_and_images(self) -> None:
        state = ContextStoreState(file_exists=True, file_is_empty=False,
                                  dir_exists=True, dir_is_empty=False, image_count=2)
        outcome, message = classify(state, "context.md")
        self.assertEqual(outcome, ClearOutcome.HAS_CONTENT)
        self.assertEqual(
            message,
            "Local context file has been cleared. Deleted 2 downloaded image(s).",
        )

    def test_content_only_in_file_with_dir_missing(self) -> None:
        state = ContextStoreState(file_exists=True, file_is_empty=False, dir_exists=False)
        outcome, message = classify(state, "context.md")
        self.assertEqual(outcome, ClearOutcome.HAS_CONTENT)
        self.assertEqual(
            message,
            "Local context file has been cleared. "
            "(Warning: The context was incomplete, missing the images directory.)",
        )

    def test_content_only_in_images_with_file_missing(self) -> None:
        state = ContextStoreState(file_exists=False, dir_exists=True,
                                  dir_is_empty=False, image_count=1)
        outcome, message = classify(state, "notes.md")
        self.assertEqual(outcome, ClearOutcome.HAS_CONTENT)
        self.assertEqual(
            message,
            "Deleted 1 downloaded image(s). "
            "(Warning: The context was incomplete, missing the notes.md file.)",
        )

    def test_present_file_with_content_and_empty_dir(self) -> None:
        state = ContextStoreState(file_exists=True, file_is_empty=False, dir_exists=True)
        outcome, message = classify(state, "context.md")
        self.assertEqual(outcome, ClearOutcome.HAS_CONTENT)
        self.assertEqual(message, "Local context file has been cleared.")


if __name__ == "__main__":
    unittest.main()
