# --------------------------------------------------------------------
# resolver.py: Linearize recipe prerequisites into an execution plan.
#
# Author: Lain Musgrove (lain.proliant@gmail.com)
# Date: Saturday, October 17 2026
#
# Distributed under terms of the MIT license.
# --------------------------------------------------------------------
from typing import Callable, Iterator, List, Mapping, Optional, Sequence, Set, Tuple

from tree_format import format_tree

from .config import Config
from .errors import CycleError, UnknownRecipeError
from .recipes import Plan, PlanStep, RecipeTable
from .util import uniq_list

# --------------------------------------------------------------------
log = Config.get().get_logger("ladle.resolver")


# --------------------------------------------------------------------
class Resolver:
    """Depth-first resolution of recipes into an ordered plan.

    Prerequisites are visited in declared order before the body of the
    recipe requiring them.  A recipe already resolved is not added to the
    plan again, and revisiting a recipe still being resolved is a cycle."""

    def __init__(self, table: RecipeTable):
        self.table = table
        self.graph: Mapping[str, Tuple[str, ...]] = table.dependency_map()
        self._done: Set[str] = set()
        self._order: List[str] = []

    def _visit(self, root: str):
        """Walk the prerequisites of `root` with an explicit stack.  `path`
        holds the recipes in progress, in order, so a cycle can be named."""
        if root in self._done:
            return
        if root not in self.graph:
            raise UnknownRecipeError(root)

        path: List[str] = [root]
        in_progress: Set[str] = {root}
        pending: List[Iterator[str]] = [iter(self.graph[root])]

        while pending:
            dep = next(pending[-1], None)

            if dep is None:
                pending.pop()
                name = path.pop()
                in_progress.discard(name)
                self._done.add(name)
                self._order.append(name)
                continue

            if dep in self._done:
                continue
            if dep not in self.graph:
                raise UnknownRecipeError(dep, path[-1])
            if dep in in_progress:
                start = path.index(dep)
                raise CycleError([*path[start:], dep])

            path.append(dep)
            in_progress.add(dep)
            pending.append(iter(self.graph[dep]))

    def resolve(self, names: Sequence[str]) -> Plan:
        targets = uniq_list(names)
        for name in targets:
            self._visit(name)

        steps = tuple(
            PlanStep(name, command)
            for name in self._order
            for command in self.table[name].commands
        )
        log.debug("Resolved %s into %s", targets, self._order)
        return Plan(targets=tuple(targets), recipes=tuple(self._order), steps=steps)


# --------------------------------------------------------------------
def resolve(table: RecipeTable, name: Optional[str] = None) -> Plan:
    """Resolve the named recipe, or the default recipe if no name is
    given, into an execution plan."""
    if name is None:
        name = table.default.name
    return Resolver(table).resolve([name])


# --------------------------------------------------------------------
def resolve_all(table: RecipeTable, names: Sequence[str]) -> Plan:
    """Resolve several recipes into a single plan.  Prerequisites shared
    between them are only included once."""
    if not names:
        return resolve(table)
    return Resolver(table).resolve(names)


# --------------------------------------------------------------------
def format_dependency_tree(
    table: RecipeTable,
    name: Optional[str] = None,
    format_node: Optional[Callable[[str], str]] = None,
) -> str:
    """Render the prerequisites of the given (or default) recipe as a
    tree.  The recipe is resolved first, so a cycle raises instead of
    recursing forever."""
    plan = resolve(table, name)
    root = plan.targets[0]

    return format_tree(
        root,
        format_node=format_node or str,
        get_children=lambda n: list(table[n].dependencies),
    )
