"""CLI argument, exit-code and output-stream behavior tests.

Verifies how ``zls.cli.main`` turns flags into listings and errors into
``Error:`` messages. Prevents regressions in command-line ergonomics.
"""

from __future__ import annotations

import contextlib
import io
import os
import sys
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from zls import __version__, cli
from zls import config as config_mod
from zls.config import DisplayMode
from zls.errors import MetadataError


class CliTestCase(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)
        self.root = Path(self._tmp.name).resolve()
        self.config_path = self.root / "no-such-config.json"
        patches = [
            mock.patch("zls.config.CONFIG_PATH", self.config_path),
            mock.patch("zls.cli.supports_color", return_value=False),
        ]
        for patcher in patches:
            patcher.start()
            self.addCleanup(patcher.stop)

    def make_sample_tree(self) -> Path:
        target = self.root / "sample"
        target.mkdir()
        (target / "file1.txt").write_text("content", encoding="utf-8")
        (target / ".hidden").write_text("hidden", encoding="utf-8")
        (target / "subdir").mkdir()
        return target

    def run_cli(self, *argv: str) -> tuple[str, str]:
        stdout = io.StringIO()
        stderr = io.StringIO()
        with contextlib.redirect_stdout(stdout), contextlib.redirect_stderr(stderr):
            cli.main(list(argv))
        return stdout.getvalue(), stderr.getvalue()


class CliListingTests(CliTestCase):
    def test_default_is_detail_listing_without_hidden_entries(self) -> None:
        target = self.make_sample_tree()

        stdout, stderr = self.run_cli(str(target))

        lines = stdout.splitlines()
        self.assertEqual(stderr, "")
        self.assertEqual(len(lines), 2)
        self.assertTrue(lines[0].startswith("- ") and lines[0].endswith(" file1.txt"))
        self.assertTrue(lines[1].startswith("d ") and lines[1].endswith(" subdir"))
        self.assertIn("7B", lines[0])
        self.assertNotIn(".hidden", stdout)

    def test_all_flag_shows_hidden_entries(self) -> None:
        target = self.make_sample_tree()

        stdout, _stderr = self.run_cli("--all", str(target))

        self.assertIn(".hidden", stdout)
        self.assertIn("file1.txt", stdout)
        self.assertIn("subdir", stdout)

    def test_short_flag_uses_compact_grid(self) -> None:
        target = self.make_sample_tree()

        stdout, _stderr = self.run_cli("-s", "--width", "80", str(target))

        self.assertEqual(stdout, "file1.txt  subdir/  \n")

    def test_bytes_flag_prints_raw_sizes(self) -> None:
        target = self.root / "sizes"
        target.mkdir()
        (target / "large_file.txt").write_text("x" * 2048, encoding="utf-8")

        human, _ = self.run_cli("-H", str(target))
        raw, _ = self.run_cli("-H", "--bytes", str(target))

        self.assertIn("2.0K", human)
        self.assertIn("2048", raw)
        self.assertNotIn("2.0K", raw)

    def test_time_flag_sorts_newest_first(self) -> None:
        target = self.root / "timed"
        target.mkdir()
        for name, stamp in (("older.txt", 1_000_000_000), ("newer.txt", 1_600_000_000)):
            path = target / name
            path.write_text(name, encoding="utf-8")
            os.utime(path, (stamp, stamp))

        stdout, _ = self.run_cli("-t", "-s", "--width", "80", str(target))

        self.assertEqual(stdout, "newer.txt  older.txt  \n")

    def test_defaults_to_current_directory(self) -> None:
        target = self.make_sample_tree()
        previous_cwd = Path.cwd()
        try:
            os.chdir(target)
            stdout, _ = self.run_cli("-s", "--width", "80")
        finally:
            os.chdir(previous_cwd)

        self.assertEqual(stdout, "file1.txt  subdir/  \n")

    def test_no_color_output_has_no_escape_sequences(self) -> None:
        target = self.make_sample_tree()

        stdout, _ = self.run_cli("--no-color", str(target))

        self.assertNotIn("\033[", stdout)

    def test_color_flag_styles_directory_names(self) -> None:
        target = self.make_sample_tree()

        stdout, _ = self.run_cli("--color", "-s", "--width", "80", str(target))

        self.assertIn("\033[1;34msubdir/\033[0m", stdout)

    def test_undecodable_file_name_prints_through_strict_utf8_stdout(self) -> None:
        target = self.root / "odd"
        target.mkdir()
        try:
            with open(os.path.join(os.fsencode(target), b"bad\xff.txt"), "wb") as handle:
                handle.write(b"abc")
        except OSError:
            self.skipTest("filesystem rejects non-UTF-8 file names")
        buffer = io.BytesIO()
        stdout = io.TextIOWrapper(buffer, encoding="utf-8", errors="strict")

        with contextlib.redirect_stdout(stdout):
            cli.main(["--no-color", str(target)])
        stdout.flush()

        self.assertIn("bad\ufffd.txt".encode("utf-8"), buffer.getvalue())

    def test_empty_directory_prints_nothing(self) -> None:
        target = self.root / "empty"
        target.mkdir()

        stdout, stderr = self.run_cli("-s", str(target))

        self.assertEqual((stdout, stderr), ("", ""))


class CliErrorTests(CliTestCase):
    def test_missing_path_exits_with_error_message(self) -> None:
        with mock.patch("zls.cli.list_directory") as list_mock:
            with self.assertRaises(SystemExit) as ctx:
                self.run_cli("/nonexistent/directory")

        list_mock.assert_not_called()
        self.assertEqual(ctx.exception.code, "Error: Path '/nonexistent/directory' does not exist")

    def test_file_path_exits_with_not_a_directory_message(self) -> None:
        target = self.root / "plain.txt"
        target.write_text("x", encoding="utf-8")

        with self.assertRaises(SystemExit) as ctx:
            self.run_cli(str(target))

        self.assertEqual(ctx.exception.code, f"Error: '{target}' is not a directory")

    def test_metadata_failure_surfaces_message_without_partial_output(self) -> None:
        target = self.make_sample_tree()
        failure = MetadataError(target / "file1.txt", PermissionError(13, "Permission denied"))
        stdout = io.StringIO()

        with mock.patch("zls.cli.list_directory", side_effect=failure):
            with contextlib.redirect_stdout(stdout), self.assertRaises(SystemExit) as ctx:
                cli.main([str(target)])

        self.assertEqual(
            ctx.exception.code,
            f"Error: Cannot read metadata for '{target / 'file1.txt'}': Permission denied",
        )
        self.assertEqual(stdout.getvalue(), "")

    def test_overlong_path_component_exits_with_metadata_message(self) -> None:
        target = self.root / ("x" * 300)

        with self.assertRaises(SystemExit) as ctx:
            self.run_cli(str(target))

        self.assertTrue(ctx.exception.code.startswith(f"Error: Cannot read metadata for '{target}'"))

    def test_short_and_long_flags_are_mutually_exclusive(self) -> None:
        with self.assertRaises(SystemExit) as ctx:
            self.run_cli("--short", "--long", str(self.root))
        self.assertEqual(ctx.exception.code, 2)

    def test_width_must_be_positive(self) -> None:
        with self.assertRaises(SystemExit) as ctx:
            self.run_cli("--width", "0", str(self.root))
        self.assertEqual(ctx.exception.code, 2)


class CliInfoTests(CliTestCase):
    def test_help_lists_description_and_flags(self) -> None:
        stdout = io.StringIO()
        with contextlib.redirect_stdout(stdout), self.assertRaises(SystemExit) as ctx:
            cli.main(["--help"])

        self.assertEqual(ctx.exception.code, 0)
        text = stdout.getvalue()
        self.assertIn(cli.DESCRIPTION, text)
        for flag in ("--all", "--short", "--long", "--time", "--human", "--bytes", "--version"):
            self.assertIn(flag, text)

    def test_version_prints_program_and_version(self) -> None:
        stdout = io.StringIO()
        with contextlib.redirect_stdout(stdout), self.assertRaises(SystemExit) as ctx:
            cli.main(["--version"])

        self.assertEqual(ctx.exception.code, 0)
        self.assertEqual(stdout.getvalue().strip(), f"zls {__version__}")

    def test_main_reads_sys_argv_when_no_argv_given(self) -> None:
        target = self.make_sample_tree()
        stdout = io.StringIO()
        with mock.patch.object(sys, "argv", ["zls", "-s", "--width", "80", str(target)]):
            with contextlib.redirect_stdout(stdout):
                cli.main()

        self.assertEqual(stdout.getvalue(), "file1.txt  subdir/  \n")


class CliConfigDefaultsTests(CliTestCase):
    def test_preferences_file_supplies_defaults(self) -> None:
        self.config_path.write_text(
            '{"show_hidden": true, "display_mode": "compact", "human": false}',
            encoding="utf-8",
        )
        args = cli.build_parser().parse_args([str(self.root)])

        config = cli.config_from_args(args)

        self.assertTrue(config.show_hidden)
        self.assertEqual(config.display_mode, DisplayMode.COMPACT)
        self.assertFalse(config.human)

    def test_flags_override_preferences(self) -> None:
        self.config_path.write_text('{"display_mode": "compact", "color": true}', encoding="utf-8")
        args = cli.build_parser().parse_args(["--long", "--no-color", str(self.root)])

        config = cli.config_from_args(args)

        self.assertEqual(config.display_mode, DisplayMode.DETAIL)
        self.assertFalse(config.color)

    def test_preferences_file_is_read_once_per_invocation(self) -> None:
        self.config_path.write_text('{"show_hidden": true}', encoding="utf-8")
        args = cli.build_parser().parse_args([str(self.root)])

        with mock.patch("zls.cli.load_config", wraps=config_mod.load_config) as load_mock:
            config = cli.config_from_args(args)

        load_mock.assert_called_once_with()
        self.assertTrue(config.show_hidden)

    def test_color_falls_back_to_terminal_detection(self) -> None:
        args = cli.build_parser().parse_args([str(self.root)])
        with mock.patch("zls.cli.supports_color", return_value=True):
            config = cli.config_from_args(args)
        self.assertTrue(config.color)


if __name__ == "__main__":
    unittest.main()
