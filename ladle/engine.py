# --------------------------------------------------------------------
# engine.py: Wire the runner's capabilities into a Xeno injector.
#
# Author: Lain Musgrove (lain.proliant@gmail.com)
# Date: Sunday, October 18 2026
#
# Distributed under terms of the MIT license.
# --------------------------------------------------------------------
import asyncio
from pathlib import Path
from typing import Any, List, Optional, Sequence

import xeno
from ansilog import dim, fg

from .config import Config
from .executor import ExecutionResult, Executor
from .parser import find_recipe_file, load
from .recipes import Plan, Recipe, RecipeTable
from .resolver import format_dependency_tree, resolve_all
from .shell import ShellEnvironment, Spawner, SubprocessSpawner
from .util import badge, plural

# --------------------------------------------------------------------
log = Config.get().get_logger("ladle.engine")


# --------------------------------------------------------------------
def if_not_quiet(f):
    def wrapper(self, *args, **kwargs):
        if not self.config.quiet:
            return f(self, *args, **kwargs)
        return None

    return wrapper


# --------------------------------------------------------------------
class RunnerEngine:
    """Provides the configuration, shell environment, spawner and executor
    as injectable resources, and drives a single invocation of the runner.

    A `spawner` may be given to replace the default `SubprocessSpawner`,
    e.g. with a `RecordingSpawner` in tests."""

    def __init__(self, config: Optional[Config] = None, spawner: Optional[Spawner] = None):
        self.config = config or Config.get()
        self._spawner = spawner
        self.loop = asyncio.new_event_loop()
        asyncio.set_event_loop(self.loop)
        self.injector = xeno.AsyncInjector()

        @self.provide
        def config():
            return self.config

        @self.provide
        def environment(config):
            return ShellEnvironment.inherit(
                cwd=config.working_directory,
                overrides=config.env_overrides,
                shell=config.shell,
            )

        @self.provide
        def spawner():
            return self._spawner or SubprocessSpawner()

        @self.provide
        def executor(config, environment, spawner):
            return Executor(
                environment, spawner, quiet=config.quiet, dry_run=config.dry_run
            )

    def provide(self, f):
        """ A decorator for specifying available singleton resources. """

        @xeno.MethodAttributes.wraps(f)
        async def wrapper(*args, **kwargs):
            return await xeno.async_wrap(f, *args, **kwargs)

        self.injector.provide(wrapper, is_singleton=True)
        return wrapper

    def require(self, name: str) -> Any:
        return self.injector.require(name)

    def close(self):
        asyncio.set_event_loop(None)
        self.loop.close()

    def recipe_path(self) -> Path:
        if self.config.file:
            return Path(self.config.file)
        return find_recipe_file(Path.cwd())

    def load_table(self, path: Optional[Path] = None) -> RecipeTable:
        return load(path or self.recipe_path())

    def plan(self, table: RecipeTable, names: Sequence[str]) -> Plan:
        return resolve_all(table, names)

    def execute(self, plan: Plan) -> ExecutionResult:
        executor: Executor = self.require("executor")
        return executor.run(plan)

    def describe_recipe(self, recipe: Recipe, default: Recipe) -> str:
        parts = [str(fg.cyan(recipe.name)) if recipe is default else recipe.name]
        if recipe.dependencies:
            parts.append(str(dim(" ".join(recipe.dependencies))))
        if recipe is default:
            parts.append(badge(fg.green("default")))
        if recipe.doc:
            parts.append(str(dim("# " + recipe.doc)))
        return " ".join(parts)

    def list_recipes(self, table: RecipeTable) -> List[str]:
        if not table:
            return []
        default = table.default
        return [self.describe_recipe(recipe, default) for recipe in table.values()]

    def print_recipes(self, table: RecipeTable):
        """ Logs the list of recipes currently defined. """
        lines = self.list_recipes(table)
        if not lines:
            log.error("There are no recipes defined.")
            return
        for line in lines:
            log.info(line)

    def print_tree(self, table: RecipeTable, names: Sequence[str]):
        """ Prints a tree illustrating the prerequisites of each recipe. """
        for name in names or [None]:
            log.info(
                format_dependency_tree(
                    table, name, lambda n: str(fg.cyan(n)) if n == table.default.name else n
                )
            )

    @if_not_quiet
    def log_ok(self, result: ExecutionResult):
        if self.config.verbose:
            log.info(
                "Ran %s from %s.",
                plural(len(result.executed), "command"),
                plural(len(result.plan.recipes), "recipe"),
            )
        log.info(str(fg.green("OK")))

    def log_failure(self, e: Exception):
        log.error(str(e))
        if self.config.debug:
            log.exception("Exception details >>>")
        log.info(str(fg.red("FAIL")))
