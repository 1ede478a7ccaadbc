# --------------------------------------------------------------------
# recipes.py: Recipes, commands and the recipe table.
#
# Author: Lain Musgrove (lain.proliant@gmail.com)
# Date: Saturday, October 17 2026
#
# Distributed under terms of the MIT license.
# --------------------------------------------------------------------
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterable, Iterator, List, Mapping, Optional, Tuple

from .errors import NoRecipesError


# --------------------------------------------------------------------
@dataclass(frozen=True)
class Command:
    """ A single command line of a recipe body. """

    text: str
    silent: bool = False
    ignore_errors: bool = False
    line: int = 0

    def __str__(self):
        return self.text


# --------------------------------------------------------------------
@dataclass(frozen=True)
class Recipe:
    """ A named, ordered list of commands with its prerequisites. """

    name: str
    commands: Tuple[Command, ...] = ()
    dependencies: Tuple[str, ...] = ()
    is_default: bool = False
    doc: Optional[str] = None
    line: int = 0

    @property
    def lines(self) -> List[str]:
        return [cmd.text for cmd in self.commands]


# --------------------------------------------------------------------
class RecipeTable(Mapping[str, Recipe]):
    """ An immutable mapping of recipe names to recipes, in file order. """

    def __init__(self, recipes: Iterable[Recipe] = ()):
        self._recipes = MappingProxyType({r.name: r for r in recipes})

    def __getitem__(self, name: str) -> Recipe:
        return self._recipes[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._recipes)

    def __len__(self) -> int:
        return len(self._recipes)

    def __eq__(self, other):
        if not isinstance(other, RecipeTable):
            return NotImplemented
        return list(self._recipes.items()) == list(other._recipes.items())

    def __hash__(self):
        return hash(tuple(self._recipes.values()))

    @property
    def names(self) -> List[str]:
        return list(self._recipes)

    @property
    def default(self) -> Recipe:
        """The recipe marked as default, otherwise the first recipe
        defined in the file."""
        if not self._recipes:
            raise NoRecipesError()
        for recipe in self._recipes.values():
            if recipe.is_default:
                return recipe
        return next(iter(self._recipes.values()))

    def dependency_map(self) -> Mapping[str, Tuple[str, ...]]:
        return MappingProxyType({r.name: r.dependencies for r in self._recipes.values()})

    def __repr__(self):
        return "<%s [%s]>" % (self.__class__.__name__, ", ".join(self._recipes))


# --------------------------------------------------------------------
@dataclass(frozen=True)
class PlanStep:
    recipe: str
    command: Command


# --------------------------------------------------------------------
@dataclass(frozen=True)
class Plan:
    """ The flattened, ordered commands to run for a set of targets. """

    targets: Tuple[str, ...]
    recipes: Tuple[str, ...]
    steps: Tuple[PlanStep, ...] = field(default_factory=tuple)

    @property
    def lines(self) -> List[str]:
        return [step.command.text for step in self.steps]

    @property
    def commands(self) -> List[Command]:
        return [step.command for step in self.steps]

    def __iter__(self) -> Iterator[PlanStep]:
        return iter(self.steps)

    def __len__(self) -> int:
        return len(self.steps)
