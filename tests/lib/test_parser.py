# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Tests for the strict positional parser."""

import argparse
import unittest

from dispatchctl.lib.core.parser import ArgumentError, ParsedCommand, build_parser, parse


class ParseTests(unittest.TestCase):
    def test_command_only(self) -> None:
        parsed = parse(["hw"])
        self.assertEqual(parsed.command, "hw")
        self.assertEqual(parsed.args, ())

    def test_command_with_args(self) -> None:
        parsed = parse(["greet", "alice", "bob"])
        self.assertEqual(parsed, ParsedCommand(command="greet", args=["alice", "bob"]))

    def test_empty_vector(self) -> None:
        parsed = parse([])
        self.assertIsNone(parsed.command)
        self.assertEqual(parsed.args, ())

    def test_skip_drops_runtime_tokens(self) -> None:
        parsed = parse(["/usr/bin/python3", "script.py", "hw", "x"], skip=2)
        self.assertEqual(parsed.command, "hw")
        self.assertEqual(parsed.args, ("x",))

    def test_skip_past_end_yields_no_command(self) -> None:
        parsed = parse(["script.py"], skip=3)
        self.assertIsNone(parsed.command)

    def test_skip_does_not_inspect_runtime_tokens(self) -> None:
        parsed = parse(["--interpreter-flag", "hw"], skip=1)
        self.assertEqual(parsed.command, "hw")

    def test_negative_skip_rejected(self) -> None:
        with self.assertRaises(ValueError):
            parse(["hw"], skip=-1)

    def test_unknown_long_option_fails(self) -> None:
        with self.assertRaises(ArgumentError) as ctx:
            parse(["--bogus"])
        self.assertIn("--bogus", str(ctx.exception))

    def test_unknown_short_option_fails(self) -> None:
        with self.assertRaises(ArgumentError):
            parse(["hw", "-x"])

    def test_help_flag_is_not_special(self) -> None:
        with self.assertRaises(ArgumentError):
            parse(["-h"])

    def test_negative_number_token_fails(self) -> None:
        with self.assertRaises(ArgumentError):
            parse(["-1"])
        with self.assertRaises(ArgumentError):
            parse(["hw", "-5"])

    def test_dash_token_with_space_fails(self) -> None:
        with self.assertRaises(ArgumentError) as ctx:
            parse(["hw", "-x y"])
        self.assertIn("-x y", str(ctx.exception))

    def test_lone_dash_is_positional(self) -> None:
        self.assertEqual(parse(["hw", "-"]), ParsedCommand("hw", ("-",)))

    def test_tokens_after_double_dash_are_positionals(self) -> None:
        parsed = parse(["--", "hw", "--x", "-1"])
        self.assertEqual(parsed.command, "hw")
        self.assertEqual(parsed.args, ("--x", "-1"))

    def test_option_after_double_dash_in_runtime_tokens_still_checked(self) -> None:
        with self.assertRaises(ArgumentError):
            parse(["--", "hw", "--bogus"], skip=1)

    def test_parsed_command_is_hashable(self) -> None:
        parsed = parse(["greet", "alice"])
        self.assertEqual(hash(parsed), hash(ParsedCommand("greet", ["alice"])))
        self.assertIsInstance(parsed.args, tuple)

    def test_argument_error_is_argparse_error(self) -> None:
        self.assertIs(ArgumentError, argparse.ArgumentError)

    def test_input_not_mutated(self) -> None:
        raw = ["script.py", "hw", "a"]
        parse(raw, skip=1)
        self.assertEqual(raw, ["script.py", "hw", "a"])


class BuildParserTests(unittest.TestCase):
    def test_completer_attached_to_command(self) -> None:
        def completer(prefix, parsed_args=None, **kwargs):
            return ["hw"]

        parser = build_parser(completer)
        command_action = next(a for a in parser._actions if a.dest == "command")
        self.assertIs(getattr(command_action, "completer", None), completer)

    def test_no_completer_by_default(self) -> None:
        parser = build_parser()
        command_action = next(a for a in parser._actions if a.dest == "command")
        self.assertFalse(hasattr(command_action, "completer"))
