# --------------------------------------------------------------------
# errors.py: Exceptions and error management tools.
#
# Author: Lain Musgrove (lain.proliant@gmail.com)
# Date: Saturday, October 17 2026
#
# Distributed under terms of the MIT license.
# --------------------------------------------------------------------
from pathlib import Path
from typing import Optional, Sequence


# --------------------------------------------------------------------
class LadleError(Exception):
    pass


# --------------------------------------------------------------------
class ParseError(LadleError):
    """ The recipe file is malformed.  Always names the offending line. """

    def __init__(self, message: str, line: int, text: str = ""):
        self.message = message
        self.line = line
        self.text = text
        super().__init__("line %d: %s" % (line, message))


# --------------------------------------------------------------------
class DuplicateRecipeError(ParseError):
    def __init__(self, name: str, line: int, text: str, first_line: int):
        self.name = name
        self.first_line = first_line
        super().__init__(
            "recipe '%s' is already defined on line %d" % (name, first_line),
            line,
            text,
        )


# --------------------------------------------------------------------
class UnexpectedIndentError(ParseError):
    def __init__(self, line: int, text: str):
        super().__init__("indented line outside of a recipe", line, text)


# --------------------------------------------------------------------
class InvalidHeaderError(ParseError):
    pass


# --------------------------------------------------------------------
class DuplicateDefaultError(ParseError):
    def __init__(self, name: str, line: int, text: str, default: str):
        self.name = name
        self.default = default
        super().__init__(
            "recipe '%s' is marked default, but '%s' already is" % (name, default),
            line,
            text,
        )


# --------------------------------------------------------------------
class ResolveError(LadleError):
    pass


# --------------------------------------------------------------------
class UnknownRecipeError(ResolveError):
    def __init__(self, name: str, required_by: Optional[str] = None):
        self.name = name
        self.required_by = required_by
        if required_by is None:
            super().__init__("'%s' is not a known recipe." % name)
        else:
            super().__init__(
                "'%s' is not a known recipe (required by '%s')." % (name, required_by)
            )


# --------------------------------------------------------------------
class CycleError(ResolveError):
    def __init__(self, cycle: Sequence[str]):
        self.cycle = list(cycle)
        super().__init__("Dependency cycle: %s" % " -> ".join(self.cycle))


# --------------------------------------------------------------------
class NoRecipesError(ResolveError):
    def __init__(self):
        super().__init__("There are no recipes defined.")


# --------------------------------------------------------------------
class ExecutionFailure(LadleError):
    def __init__(self, index: int, command: str, returncode: int):
        self.index = index
        self.command = command
        self.returncode = returncode
        super().__init__(
            "Stopped at command %d (returncode: %d): %s" % (index, returncode, command)
        )


# --------------------------------------------------------------------
class RecipeFileNotFoundError(LadleError):
    def __init__(self, start: Path):
        self.start = start
        super().__init__("No justfile found in '%s' or any parent directory." % start)


# --------------------------------------------------------------------
class RecipeDecodeError(LadleError):
    def __init__(self, path: Path, error: UnicodeDecodeError):
        self.path = path
        super().__init__("'%s' is not valid UTF-8: %s" % (path, error))
