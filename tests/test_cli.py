import os
import shutil
import sys
import tempfile
import unittest
from unittest.mock import AsyncMock, MagicMock, patch

# Add src to the path so we can import localctx modules
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "../src")))

from localctx import cli


class TestParseArgs(unittest.TestCase):
    """Tests for command line parsing"""

    def test_defaults(self) -> None:
        args = cli.parse_args([])
        self.assertIsNone(args.enable_context)
        self.assertIsNone(args.context_dir)
        self.assertIsNone(args.model)
        self.assertEqual(args.input, [])
        self.assertFalse(args.version)

    def test_flags(self) -> None:
        args = cli.parse_args(["--enable-context", "--context-dir", "/tmp/ctx", "--model", "m", "/context", "status"])
        self.assertTrue(args.enable_context)
        self.assertEqual(args.context_dir, "/tmp/ctx")
        self.assertEqual(args.model, "m")
        self.assertEqual(args.input, ["/context", "status"])


def make_app() -> MagicMock:
    app = MagicMock()
    app.state.running = True
    app.state.use_local_context = False
    app.context_store.context_file_path = "/tmp/ctx/context.md"
    app.process_input = AsyncMock(return_value=None)
    return app


@patch("localctx.cli.save_readline_history")
@patch("localctx.cli.setup_readline")
class TestRunRepl(unittest.IsolatedAsyncioTestCase):
    """Tests for the interactive loop"""

    async def test_exit_command_stops_loop(self, mock_setup, mock_save) -> None:
        app = make_app()
        app.process_input = AsyncMock(side_effect=[None, "EXIT"])
        with patch("localctx.cli.get_user_input", AsyncMock(side_effect=["/help", "/exit"])), \
                patch("localctx.cli.terminal_print"):
            await cli.run_repl(app)
        self.assertEqual([c.args[0] for c in app.process_input.await_args_list], ["/help", "/exit"])
        mock_setup.assert_called_once()
        mock_save.assert_called_once()

    async def test_eof_stops_loop(self, mock_setup, mock_save) -> None:
        app = make_app()
        with patch("localctx.cli.get_user_input", AsyncMock(side_effect=["hello", EOFError()])), \
                patch("localctx.cli.terminal_print"):
            await cli.run_repl(app)
        app.process_input.assert_awaited_once_with("hello")
        mock_save.assert_called_once()

    async def test_stops_when_state_not_running(self, mock_setup, mock_save) -> None:
        app = make_app()
        app.state.running = False
        reader = AsyncMock()
        with patch("localctx.cli.get_user_input", reader), patch("localctx.cli.terminal_print"):
            await cli.run_repl(app)
        reader.assert_not_awaited()


class TestRunCli(unittest.TestCase):
    """Tests for one-shot mode and settings overrides"""

    def setUp(self) -> None:
        self.temp_dir = tempfile.mkdtemp()

    def tearDown(self) -> None:
        shutil.rmtree(self.temp_dir)

    def test_one_shot_runs_input_with_overrides(self) -> None:
        app = make_app()
        missing_env = os.path.join(self.temp_dir, ".env")
        with patch("localctx.cli.Application", return_value=app) as app_cls, \
                patch("localctx.cli.get_env_path", return_value=missing_env), \
                patch("localctx.cli.run_repl") as repl, \
                patch.dict(os.environ, {}, clear=True):
            cli.run_cli(["--enable-context", "--context-dir", self.temp_dir, "/context", "status"])

        settings = app_cls.call_args.args[0]
        self.assertTrue(settings.context.enabled_by_default)
        self.assertEqual(settings.context.context_dir, os.path.abspath(self.temp_dir))
        app.setup.assert_called_once()
        app.process_input.assert_awaited_once_with("/context status")
        repl.assert_not_called()

    def test_invalid_settings_exit(self) -> None:
        with patch("localctx.cli.get_env_path", return_value=os.path.join(self.temp_dir, ".env")), \
                patch.dict(os.environ, {"LOCALCTX_CONTEXT_FILE": "a/b.md"}, clear=True), \
                patch("sys.stderr"):
            with self.assertRaises(SystemExit) as ctx:
                cli.run_cli([])
        self.assertEqual(ctx.exception.code, 2)


if __name__ == "__main__":
    unittest.main()
