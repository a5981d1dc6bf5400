import io
import unittest
from unittest.mock import patch, MagicMock

import minish
from shell_state import ShellState


class TestBuildParser(unittest.TestCase):
    def test_defaults(self):
        args = minish.build_parser().parse_args([])
        self.assertIsNone(args.command)
        self.assertEqual("$ ", args.prompt)
        self.assertIsNone(args.log_level)

    def test_options(self):
        args = minish.build_parser().parse_args(["-c", "echo hi", "--prompt", "> ", "--log-level", "debug"])
        self.assertEqual("echo hi", args.command)
        self.assertEqual("> ", args.prompt)
        self.assertEqual("debug", args.log_level)


class TestRunCommand(unittest.TestCase):
    def setUp(self):
        self.out = io.StringIO()
        self.state = ShellState(environ={}, stdout=self.out)

    def test_status_of_command(self):
        self.assertEqual(0, minish.run_command("echo hi", self.state))
        self.assertEqual("hi\n", self.out.getvalue())

    def test_failed_command_status(self):
        self.assertEqual(1, minish.run_command("cd /nonexistent/path", self.state))
        self.assertEqual(127, minish.run_command("nosuchprogram", self.state))

    def test_blank_command_is_zero(self):
        self.assertEqual(0, minish.run_command("  ", self.state))

    def test_exit_status(self):
        self.assertEqual(42, minish.run_command("exit 42", self.state))


class TestMain(unittest.TestCase):
    def setUp(self):
        patcher = patch.object(minish, "configure_logging")
        self.configure_logging = patcher.start()
        self.addCleanup(patcher.stop)

    def test_exit_terminates_with_status(self):
        for n in (0, 1, 3, 255):
            with self.assertRaises(SystemExit) as ctx:
                minish.main(["-c", f"exit {n}"])
            self.assertEqual(n, ctx.exception.code)

    def test_exit_out_of_range_is_zero(self):
        with self.assertRaises(SystemExit) as ctx:
            minish.main(["-c", "exit 99999999999999999999999"])
        self.assertEqual(0, ctx.exception.code)

    def test_exit_non_numeric_is_zero(self):
        with self.assertRaises(SystemExit) as ctx:
            minish.main(["-c", "exit abc"])
        self.assertEqual(0, ctx.exception.code)

    def test_command_output(self):
        buf = io.StringIO()
        with patch("sys.stdout", buf), self.assertRaises(SystemExit) as ctx:
            minish.main(["-c", "echo 'hello   world'"])
        self.assertEqual(0, ctx.exception.code)
        self.assertEqual("hello   world\n", buf.getvalue())

    def test_log_level_is_forwarded(self):
        with self.assertRaises(SystemExit):
            minish.main(["--log-level", "debug", "-c", "echo"])
        self.configure_logging.assert_called_once_with("debug")

    def test_interactive_runs_shell(self):
        fake_shell = MagicMock()
        fake_shell.run.return_value = 5
        with patch.object(minish, "Shell", return_value=fake_shell) as mock_shell:
            with self.assertRaises(SystemExit) as ctx:
                minish.main(["--prompt", "% "])

        self.assertEqual(5, ctx.exception.code)
        _, kwargs = mock_shell.call_args
        self.assertEqual("% ", kwargs["prompt"])


if __name__ == "__main__":
    unittest.main()
