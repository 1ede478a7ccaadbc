# --------------------------------------------------------------------
# parser.py: Parse justfile-style recipe files into a RecipeTable.
#
# Author: Lain Musgrove (lain.proliant@gmail.com)
# Date: Saturday, October 17 2026
#
# Distributed under terms of the MIT license.
# --------------------------------------------------------------------
import re
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from .config import Config
from .errors import (
    DuplicateDefaultError,
    DuplicateRecipeError,
    InvalidHeaderError,
    ParseError,
    RecipeDecodeError,
    RecipeFileNotFoundError,
    UnexpectedIndentError,
)
from .recipes import Command, Recipe, RecipeTable

# --------------------------------------------------------------------
RECIPE_FILENAMES = ("justfile", "Justfile", ".justfile")
NAME_RX = re.compile(r"^[A-Za-z_][A-Za-z0-9_-]*$")
ATTRIBUTE_RX = re.compile(r"^\[\s*([^\]]*?)\s*\]$")
SILENT_PREFIX = "@"
IGNORE_ERRORS_PREFIX = "-"
CONTINUATION = "\\"

log = Config.get().get_logger("ladle.parser")


# --------------------------------------------------------------------
def find_recipe_file(start: Optional[Path] = None) -> Path:
    """ Find the nearest recipe file in `start` or any of its parents. """
    start = (start or Path.cwd()).resolve()
    for directory in (start, *start.parents):
        for filename in RECIPE_FILENAMES:
            path = directory / filename
            if path.is_file():
                log.debug("Found recipe file: %s", path)
                return path
    raise RecipeFileNotFoundError(start)


# --------------------------------------------------------------------
def split_command_prefix(text: str) -> Tuple[str, bool, bool]:
    """Strip any leading `@` (silent) and `-` (ignore errors) markers,
    in either order, from a command line."""
    silent = False
    ignore_errors = False
    while text:
        if text.startswith(SILENT_PREFIX) and not silent:
            silent = True
        elif text.startswith(IGNORE_ERRORS_PREFIX) and not ignore_errors:
            ignore_errors = True
        else:
            break
        text = text[1:]
    return text.lstrip(), silent, ignore_errors


# --------------------------------------------------------------------
class _RecipeBuilder:
    def __init__(self, name: str, dependencies: List[str], line: int,
                 is_default: bool, doc: Optional[str]):
        self.name = name
        self.dependencies = dependencies
        self.line = line
        self.is_default = is_default
        self.doc = doc
        self.commands: List[Command] = []
        self.continued: Optional[Command] = None

    def add_line(self, text: str, line: int):
        if self.continued is not None:
            prev = self.continued
            text = prev.text[: -len(CONTINUATION)].rstrip() + " " + text
            self.continued = None
            cmd = Command(text, prev.silent, prev.ignore_errors, prev.line)
        else:
            text, silent, ignore_errors = split_command_prefix(text)
            cmd = Command(text, silent, ignore_errors, line)

        if cmd.text.endswith(CONTINUATION):
            self.continued = cmd
        else:
            self.commands.append(cmd)

    def build(self) -> Recipe:
        if self.continued is not None:
            prev = self.continued
            text = prev.text[: -len(CONTINUATION)].rstrip()
            if text:
                self.commands.append(Command(text, prev.silent, prev.ignore_errors, prev.line))
            self.continued = None
        return Recipe(
            name=self.name,
            commands=tuple(self.commands),
            dependencies=tuple(self.dependencies),
            is_default=self.is_default,
            doc=self.doc,
            line=self.line,
        )


# --------------------------------------------------------------------
class RecipeParser:
    """Parses the text of a recipe file.

    Recipes are introduced by an unindented header, `name [dep...]: [dep...]`,
    and followed by their indented command lines.  Unindented `[default]`
    attribute lines mark the next recipe as the default, and an unindented
    comment directly above a header becomes that recipe's doc string."""

    def __init__(self, text: str):
        self._lines = text.splitlines()
        self._recipes: List[Recipe] = []
        self._defined: Dict[str, int] = {}
        self._current: Optional[_RecipeBuilder] = None
        self._default: Optional[str] = None
        self._pending_default: Optional[Tuple[int, str]] = None
        self._pending_doc: Optional[str] = None

    def parse(self) -> RecipeTable:
        for lineno, raw in enumerate(self._lines, start=1):
            self._parse_line(lineno, raw.rstrip())

        self._finish_recipe()
        if self._pending_default is not None:
            lineno, text = self._pending_default
            raise ParseError("attribute is not followed by a recipe", lineno, text)
        log.debug("Parsed %d recipe(s).", len(self._recipes))
        return RecipeTable(self._recipes)

    def _parse_line(self, lineno: int, line: str):
        stripped = line.strip()

        if not stripped:
            self._pending_doc = None
            return

        indented = line[0] in " \t"

        if stripped.startswith("#"):
            if not indented:
                self._pending_doc = stripped.lstrip("#").strip() or None
            return

        if indented:
            if self._current is None:
                raise UnexpectedIndentError(lineno, line)
            self._pending_doc = None
            self._current.add_line(stripped, lineno)
            return

        self._finish_recipe()
        doc, self._pending_doc = self._pending_doc, None

        match = ATTRIBUTE_RX.match(stripped)
        if match:
            self._parse_attribute(lineno, line, match.group(1))
            self._pending_doc = doc
        else:
            self._parse_header(lineno, line, doc)

    def _parse_attribute(self, lineno: int, line: str, attribute: str):
        if attribute != "default":
            raise ParseError("unknown attribute '%s'" % attribute, lineno, line)
        self._pending_default = (lineno, line)

    def _parse_header(self, lineno: int, line: str, doc: Optional[str]):
        before, colon, after = line.partition(":")
        if not colon:
            raise InvalidHeaderError("expected a recipe header ending in ':'", lineno, line)

        tokens = before.split()
        if not tokens:
            raise InvalidHeaderError("recipe header has no name", lineno, line)

        name, dependencies = tokens[0], tokens[1:] + after.split()
        for token in [name, *dependencies]:
            if not NAME_RX.match(token):
                raise InvalidHeaderError("invalid recipe name '%s'" % token, lineno, line)

        if name in self._defined:
            raise DuplicateRecipeError(name, lineno, line, self._defined[name])
        self._defined[name] = lineno

        is_default = self._pending_default is not None
        self._pending_default = None
        if is_default:
            if self._default is not None:
                raise DuplicateDefaultError(name, lineno, line, self._default)
            self._default = name

        self._current = _RecipeBuilder(name, dependencies, lineno, is_default, doc)

    def _finish_recipe(self):
        if self._current is not None:
            self._recipes.append(self._current.build())
            self._current = None


# --------------------------------------------------------------------
def parse(text: str) -> RecipeTable:
    """ Parse the given recipe file text into a RecipeTable. """
    return RecipeParser(text).parse()


# --------------------------------------------------------------------
def load(path: Path) -> RecipeTable:
    """ Read and parse the recipe file at the given path. """
    log.debug("Loading recipes from %s", path)
    try:
        text = Path(path).read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise RecipeDecodeError(Path(path), e) from e
    return parse(text)
