# --------------------------------------------------------------------
# test_examples.py
#
# Author: Lain Musgrove (lain.proliant@gmail.com)
# Date: Sunday, October 18 2026
#
# Distributed under terms of the MIT license.
# --------------------------------------------------------------------

import unittest
from pathlib import Path

from ladle import Executor, RecordingSpawner, ShellEnvironment, load, resolve

EXAMPLES = Path(__file__).resolve().parents[2] / "examples"


# --------------------------------------------------------------------
class ExamplesTests(unittest.TestCase):
    def setUp(self):
        path = EXAMPLES / "justfile"
        if not path.exists():
            self.skipTest("The examples directory is not available.")
        self.table = load(path)

    def test_example_justfile(self):
        self.assertEqual(self.table.names, ["default", "cargo-fix", "release"])
        self.assertEqual(self.table.default.name, "default")
        self.assertEqual(self.table["default"].doc, "Format, test and build the crate.")

    def test_release_runs_default_first(self):
        spawner = RecordingSpawner()
        echoed = []
        executor = Executor(
            ShellEnvironment(cwd=EXAMPLES), spawner, echo=lambda s: echoed.append(s.command.text)
        )
        result = executor.run(resolve(self.table, "release"))
        self.assertTrue(result.succeeded)
        self.assertEqual(
            spawner.commands,
            [
                "cargo fmt",
                "cargo test",
                "cargo build",
                'echo "building release binary"',
                "cargo build --release",
            ],
        )
        self.assertNotIn('echo "building release binary"', echoed)


# --------------------------------------------------------------------
if __name__ == "__main__":
    unittest.main()
