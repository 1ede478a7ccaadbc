# --------------------------------------------------------------------
# config.py: Ladle configuration options.
#
# Author: Lain Musgrove (lain.proliant@gmail.com)
# Date: Saturday, October 17 2026
#
# Distributed under terms of the MIT license.
# --------------------------------------------------------------------
import argparse
import logging
import os
from typing import Dict, List, Optional, Sequence, Set

import ansilog

# --------------------------------------------------------------------
HELP = """
# Ladle: A justfile-style command recipe runner.
## Usage: `ladle [OPTION]... [RECIPE]...`
Run the given recipes (or the default recipe) from the nearest `justfile`.

# Usage Syntax
### Modes
By default, the specified or default recipes and their prerequisites will
be run, unless one of the options below is specified.

- `-l, --list`: List available recipes.
- `--tree`: Print a tree illustrating the prerequisites of the given
  (or default) recipe.
- `-n, --dry-run`: Print the commands that would be run without running them.

## Options
- `-f, --file`: The recipe file to use.  Defaults to the first `justfile`,
  `Justfile` or `.justfile` found in the current directory or its parents.
- `-d, --working-directory`: Run commands in the given directory.
  Defaults to the current directory.
- `-E, --env KEY=VALUE`: Set an environment variable for all commands.
  May be given more than once.
- `--shell`: The shell used to run commands.  Defaults to `{config.shell}`.
- `-v, --verbose`: Print extra information at run time.
- `-q, --quiet`: Print nothing, unless something goes wrong.
- `-D, --debug`: Causes ladle to print copious amounts of diagnostic info,
  including stack traces for errors.  Can also be enabled by setting the
  `LADLE_DEBUG` environment variable.
""".strip()

DEFAULT_SHELL = "sh"
DEFAULT_SHELL_ARGS = ("-cu",)


# --------------------------------------------------------------------
class Config:
    """ Defines the command line parameters and other configuration options."""

    _instance: Optional["Config"] = None
    _loggers: Set[str] = set()

    def __init__(self):
        self.recipes: List[str] = []
        self.file: Optional[str] = None
        self.working_directory: Optional[str] = None
        self.env: List[str] = []
        self.shell = DEFAULT_SHELL
        self.help = False
        self.verbose = False
        self.quiet = False
        self.dry_run = False
        self.print_tree = False
        self.list_recipes = False
        self.debug = "LADLE_DEBUG" in os.environ

    def print_help(self):
        self.get_logger("ladle.config").info(HELP.format(config=self))

    @property
    def env_overrides(self) -> Dict[str, str]:
        overrides = {}
        for assignment in self.env:
            key, sep, value = assignment.partition("=")
            if not sep or not key:
                raise ValueError("Invalid environment assignment: '%s'" % assignment)
            overrides[key] = value
        return overrides

    def get_logger(self, name: str) -> logging.Logger:
        logger = ansilog.getLogger(name)
        self._loggers.add(name)
        if self.debug:
            ansilog.handler.setLevel(logging.DEBUG)
            logger.setLevel(logging.DEBUG)
        else:
            ansilog.handler.setLevel(logging.INFO)
            logger.setLevel(logging.INFO)
        return logger

    @classmethod
    def get_parser(cls, desc) -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(prog="ladle", description=desc, add_help=False)
        parser.add_argument("recipes", nargs="*", default=[])
        parser.add_argument("--help", "-h", dest="help", action="store_true")
        parser.add_argument("--file", "-f", dest="file")
        parser.add_argument("--working-directory", "-d", dest="working_directory")
        parser.add_argument("--env", "-E", dest="env", action="append", default=[])
        parser.add_argument("--shell", dest="shell", default=DEFAULT_SHELL)
        parser.add_argument("--verbose", "-v", dest="verbose", action="store_true")
        parser.add_argument("--quiet", "-q", dest="quiet", action="store_true")
        parser.add_argument("--dry-run", "-n", dest="dry_run", action="store_true")
        parser.add_argument("--tree", dest="print_tree", action="store_true")
        parser.add_argument("--list", "-l", dest="list_recipes", action="store_true")
        parser.add_argument("--debug", "-D", dest="debug", action="store_true")
        return parser

    @classmethod
    def get(cls) -> "Config":
        if cls._instance is None:
            cls._instance = Config()
        return cls._instance

    @classmethod
    def set(cls, config: "Config"):
        cls._instance = config

    def load(self, argv: Optional[Sequence[str]] = None, desc="Recipe runner") -> "Config":
        parser = self.get_parser(desc)
        parser.parse_args(argv, namespace=self)
        try:
            self.env_overrides
        except ValueError as e:
            parser.error(str(e))
        self.debug = self.debug or "LADLE_DEBUG" in os.environ
        for name in sorted(self._loggers):
            self.get_logger(name)
        return self
