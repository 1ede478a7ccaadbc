# -------------------------------------------------------------------
# Ladle: A justfile-style command recipe runner.
#
# Author: Lain Musgrove (lain.proliant@gmail.com)
# Date: Saturday, October 17 2026
#
# Distributed under terms of the MIT license.
# -------------------------------------------------------------------
from .engine import RunnerEngine
from .errors import (
    CycleError,
    DuplicateDefaultError,
    DuplicateRecipeError,
    ExecutionFailure,
    InvalidHeaderError,
    LadleError,
    NoRecipesError,
    ParseError,
    ResolveError,
    UnexpectedIndentError,
    UnknownRecipeError,
)
from .executor import CommandState, ExecutionResult, Executor, PlanState, execute
from .parser import find_recipe_file, load, parse
from .recipes import Command, Plan, PlanStep, Recipe, RecipeTable
from .resolver import format_dependency_tree, resolve, resolve_all
from .shell import RecordingSpawner, ShellEnvironment, Spawner, SubprocessSpawner
