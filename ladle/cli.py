# --------------------------------------------------------------------
# cli.py: The `ladle` command line front-end.
#
# Author: Lain Musgrove (lain.proliant@gmail.com)
# Date: Sunday, October 18 2026
#
# Distributed under terms of the MIT license.
# --------------------------------------------------------------------
import sys
from typing import Optional, Sequence

from .config import Config
from .engine import RunnerEngine
from .errors import ExecutionFailure, LadleError
from .shell import Spawner


# --------------------------------------------------------------------
def run(engine: RunnerEngine) -> int:
    """Load the recipe file and run, list or print the tree of the
    requested (or default) recipes.  Errors propagate to the caller."""
    config = engine.config
    table = engine.load_table()

    if config.list_recipes:
        engine.print_recipes(table)
        return 0

    if config.print_tree:
        engine.print_tree(table, config.recipes)
        return 0

    plan = engine.plan(table, config.recipes)
    result = engine.execute(plan)
    result.raise_for_status()
    engine.log_ok(result)
    return 0


# --------------------------------------------------------------------
def main(argv: Optional[Sequence[str]] = None, spawner: Optional[Spawner] = None) -> int:
    config = Config().load(argv)
    Config.set(config)

    if config.help:
        config.print_help()
        return 0

    engine = RunnerEngine(config, spawner)
    try:
        return run(engine)

    except ExecutionFailure as e:
        engine.log_failure(e)
        return e.returncode

    except (LadleError, OSError, ValueError) as e:
        engine.log_failure(e)
        return 1

    finally:
        engine.close()


# --------------------------------------------------------------------
if __name__ == "__main__":
    sys.exit(main())
