# --------------------------------------------------------------------
# test_parser.py
#
# Author: Lain Musgrove (lain.proliant@gmail.com)
# Date: Saturday, October 17 2026
#
# Distributed under terms of the MIT license.
# --------------------------------------------------------------------

import tempfile
import unittest
from pathlib import Path

from ladle.errors import (
    DuplicateDefaultError,
    DuplicateRecipeError,
    InvalidHeaderError,
    LadleError,
    NoRecipesError,
    ParseError,
    RecipeDecodeError,
    RecipeFileNotFoundError,
    UnexpectedIndentError,
)
from ladle.parser import find_recipe_file, load, parse, split_command_prefix

# --------------------------------------------------------------------
JUSTFILE = """\
default:
    cargo fmt
    cargo test
    cargo build
    # cargo build --release
    # cp ./target/debug/git-test ~/bin

cargo-fix:
    cargo fix --lib -p git_test --allow-dirty
    cargo fix --lib -p git_test --allow-dirty --tests
"""


# --------------------------------------------------------------------
class ParserTests(unittest.TestCase):
    def test_parse_justfile(self):
        table = parse(JUSTFILE)
        self.assertEqual(table.names, ["default", "cargo-fix"])
        self.assertEqual(
            table["default"].lines, ["cargo fmt", "cargo test", "cargo build"]
        )
        self.assertEqual(
            table["cargo-fix"].lines,
            [
                "cargo fix --lib -p git_test --allow-dirty",
                "cargo fix --lib -p git_test --allow-dirty --tests",
            ],
        )
        self.assertEqual(table.default.name, "default")
        self.assertEqual(table["default"].line, 1)
        self.assertEqual(table["cargo-fix"].line, 8)

    def test_default_is_first_recipe(self):
        table = parse("build:\n    make\n\ntest:\n    make test\n")
        self.assertEqual(table.default.name, "build")
        self.assertFalse(table["build"].is_default)

    def test_explicit_default(self):
        table = parse("build:\n    make\n\n[default]\ntest: build\n    make test\n")
        self.assertEqual(table.default.name, "test")
        self.assertTrue(table["test"].is_default)
        self.assertEqual(table["test"].dependencies, ("build",))

    def test_duplicate_default(self):
        with self.assertRaises(DuplicateDefaultError) as ctx:
            parse("[default]\na:\n    x\n[default]\nb:\n    y\n")
        self.assertEqual(ctx.exception.line, 5)
        self.assertEqual(ctx.exception.default, "a")

    def test_unknown_attribute(self):
        with self.assertRaises(ParseError) as ctx:
            parse("[private]\na:\n    x\n")
        self.assertEqual(ctx.exception.line, 1)

    def test_dangling_attribute(self):
        with self.assertRaises(ParseError) as ctx:
            parse("a:\n    x\n[default]\n")
        self.assertEqual(ctx.exception.line, 3)

    def test_prerequisites_before_colon(self):
        table = parse("name dep1 dep2:\n    echo hi\ndep1:\ndep2:\n")
        self.assertEqual(table["name"].dependencies, ("dep1", "dep2"))
        self.assertEqual(table["dep1"].commands, ())

    def test_prerequisites_after_colon(self):
        table = parse("default: a b\n    echo x\n")
        self.assertEqual(table["default"].dependencies, ("a", "b"))

    def test_prerequisites_on_both_sides(self):
        table = parse("all lint: test build\n")
        self.assertEqual(table["all"].dependencies, ("lint", "test", "build"))

    def test_silent_and_ignore_errors_markers(self):
        table = parse("a:\n    @echo quiet\n    -false\n    @-rm x\n    -@rm y\n    echo loud\n")
        commands = table["a"].commands
        self.assertEqual(
            [c.text for c in commands],
            ["echo quiet", "false", "rm x", "rm y", "echo loud"],
        )
        self.assertEqual([c.silent for c in commands], [True, False, True, True, False])
        self.assertEqual(
            [c.ignore_errors for c in commands], [False, True, True, True, False]
        )
        self.assertEqual([c.line for c in commands], [2, 3, 4, 5, 6])

    def test_split_command_prefix(self):
        self.assertEqual(split_command_prefix("@ echo hi"), ("echo hi", True, False))
        self.assertEqual(split_command_prefix("@@echo"), ("@echo", True, False))
        self.assertEqual(split_command_prefix("echo @"), ("echo @", False, False))

    def test_comments_are_skipped(self):
        table = parse("# top\na:\n    # inside\n    echo a\n# between\n    echo b\n")
        self.assertEqual(table["a"].lines, ["echo a", "echo b"])

    def test_doc_comment(self):
        table = parse("# Build the thing.\nbuild:\n    make\n\n# Detached.\n\ntest:\n    t\n")
        self.assertEqual(table["build"].doc, "Build the thing.")
        self.assertIsNone(table["test"].doc)

    def test_doc_comment_above_attribute(self):
        table = parse("a:\n    x\n# Run the tests.\n[default]\ntest:\n    t\n")
        self.assertEqual(table["test"].doc, "Run the tests.")
        self.assertTrue(table["test"].is_default)

    def test_blank_lines_inside_body(self):
        table = parse("a:\n    echo 1\n\n    echo 2\n")
        self.assertEqual(table["a"].lines, ["echo 1", "echo 2"])

    def test_tab_indentation(self):
        table = parse("a:\n\techo 1\n")
        self.assertEqual(table["a"].lines, ["echo 1"])

    def test_line_continuation(self):
        table = parse("a:\n    @cargo build \\\n        --release\n    echo done\n")
        self.assertEqual(table["a"].lines, ["cargo build --release", "echo done"])
        self.assertTrue(table["a"].commands[0].silent)
        self.assertEqual(table["a"].commands[0].line, 2)

    def test_dangling_line_continuation(self):
        table = parse("a:\n    echo x \\\nb:\n    @-rm y\\\n")
        self.assertEqual(table["a"].lines, ["echo x"])
        self.assertEqual(table["b"].lines, ["rm y"])
        self.assertTrue(table["b"].commands[0].silent)
        self.assertTrue(table["b"].commands[0].ignore_errors)

        table = parse("a:\n    \\\n")
        self.assertEqual(table["a"].commands, ())

    def test_duplicate_recipe(self):
        with self.assertRaises(DuplicateRecipeError) as ctx:
            parse("a:\n    x\nb:\n    y\na:\n    z\n")
        self.assertEqual(ctx.exception.name, "a")
        self.assertEqual(ctx.exception.line, 5)
        self.assertEqual(ctx.exception.first_line, 1)
        self.assertIn("line 5", str(ctx.exception))

    def test_unexpected_indent(self):
        with self.assertRaises(UnexpectedIndentError) as ctx:
            parse("# comment\n    echo orphan\na:\n    x\n")
        self.assertEqual(ctx.exception.line, 2)
        self.assertEqual(ctx.exception.text, "    echo orphan")

    def test_invalid_header(self):
        with self.assertRaises(InvalidHeaderError) as ctx:
            parse("a:\n    x\nnot a header\n")
        self.assertEqual(ctx.exception.line, 3)

        with self.assertRaises(InvalidHeaderError):
            parse(": dep\n")

        with self.assertRaises(InvalidHeaderError):
            parse("a: b$c\n")

    def test_unknown_prerequisite_is_not_a_parse_error(self):
        table = parse("a: missing\n    x\n")
        self.assertEqual(table["a"].dependencies, ("missing",))

    def test_parse_is_deterministic(self):
        self.assertEqual(parse(JUSTFILE), parse(JUSTFILE))
        self.assertNotEqual(parse(JUSTFILE), parse("default:\n    cargo fmt\n"))

    def test_empty_file(self):
        table = parse("# nothing here\n\n")
        self.assertEqual(len(table), 0)
        with self.assertRaises(NoRecipesError):
            table.default

    def test_table_is_read_only(self):
        table = parse(JUSTFILE)
        with self.assertRaises(TypeError):
            table._recipes["x"] = None


# --------------------------------------------------------------------
class RecipeFileTests(unittest.TestCase):
    def setUp(self):
        self.tempdir = tempfile.TemporaryDirectory()
        self.root = Path(self.tempdir.name).resolve()

    def tearDown(self):
        self.tempdir.cleanup()

    def test_load(self):
        path = self.root / "justfile"
        path.write_text(JUSTFILE)
        self.assertEqual(load(path), parse(JUSTFILE))

    def test_load_invalid_utf8(self):
        path = self.root / "justfile"
        path.write_bytes(b"a:\n    echo \xff\n")
        with self.assertRaises(RecipeDecodeError) as ctx:
            load(path)
        self.assertEqual(ctx.exception.path, path)
        self.assertIn(str(path), str(ctx.exception))
        self.assertIsInstance(ctx.exception, LadleError)

    def test_find_recipe_file_in_parent(self):
        (self.root / "Justfile").write_text(JUSTFILE)
        nested = self.root / "a" / "b"
        nested.mkdir(parents=True)
        self.assertEqual(find_recipe_file(nested), self.root / "Justfile")

    def test_find_recipe_file_prefers_nearest(self):
        (self.root / "justfile").write_text(JUSTFILE)
        nested = self.root / "sub"
        nested.mkdir()
        (nested / ".justfile").write_text("a:\n")
        self.assertEqual(find_recipe_file(nested), nested / ".justfile")

    def test_find_recipe_file_missing(self):
        empty = self.root / "empty"
        empty.mkdir()
        if any((p / name).exists() for p in empty.parents
               for name in ("justfile", "Justfile", ".justfile")):
            self.skipTest("A recipe file exists above the temporary directory.")
        with self.assertRaises(RecipeFileNotFoundError):
            find_recipe_file(empty)


# --------------------------------------------------------------------
if __name__ == "__main__":
    unittest.main()
