# --------------------------------------------------------------------
# executor.py: Run an execution plan, one command at a time.
#
# Author: Lain Musgrove (lain.proliant@gmail.com)
# Date: Saturday, October 17 2026
#
# Distributed under terms of the MIT license.
# --------------------------------------------------------------------
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Optional

from ansilog import dim, fg

from .config import Config
from .errors import ExecutionFailure
from .recipes import Command, Plan, PlanStep
from .shell import ShellEnvironment, Spawner, SubprocessSpawner
from .util import badge

# --------------------------------------------------------------------
EchoFunction = Callable[[PlanStep], None]

log = Config.get().get_logger("ladle.executor")


# --------------------------------------------------------------------
class CommandState(Enum):
    PENDING = "pending"
    RUNNING = "running"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


# --------------------------------------------------------------------
class PlanState(Enum):
    RUNNING = "running"
    COMPLETED = "completed"
    ABORTED = "aborted"


# --------------------------------------------------------------------
@dataclass
class CommandResult:
    index: int
    step: PlanStep
    state: CommandState = CommandState.PENDING
    returncode: Optional[int] = None

    @property
    def command(self) -> Command:
        return self.step.command

    @property
    def ignored(self) -> bool:
        return self.state == CommandState.FAILED and self.command.ignore_errors


# --------------------------------------------------------------------
@dataclass
class ExecutionResult:
    plan: Plan
    commands: List[CommandResult] = field(default_factory=list)
    state: PlanState = PlanState.RUNNING

    @property
    def failure(self) -> Optional[CommandResult]:
        for result in self.commands:
            if result.state == CommandState.FAILED and not result.ignored:
                return result
        return None

    @property
    def succeeded(self) -> bool:
        return self.state == PlanState.COMPLETED and self.failure is None

    @property
    def returncode(self) -> int:
        failure = self.failure
        if failure is None or failure.returncode is None:
            return 0
        return failure.returncode

    @property
    def executed(self) -> List[CommandResult]:
        return [r for r in self.commands if r.state != CommandState.PENDING]

    def raise_for_status(self):
        failure = self.failure
        if failure is not None:
            raise ExecutionFailure(failure.index, failure.command.text, self.returncode)


# --------------------------------------------------------------------
def log_echo(step: PlanStep):
    log.info(f"{badge(dim(step.recipe))} {fg.magenta(step.command.text)}")


# --------------------------------------------------------------------
class Executor:
    """Runs the commands of a plan sequentially, echoing each non-silent
    command first and stopping at the first command that fails."""

    def __init__(
        self,
        environment: Optional[ShellEnvironment] = None,
        spawner: Optional[Spawner] = None,
        echo: EchoFunction = log_echo,
        quiet: bool = False,
        dry_run: bool = False,
    ):
        self.environment = environment or ShellEnvironment.inherit()
        self.spawner = spawner or SubprocessSpawner()
        self.echo = echo
        self.quiet = quiet
        self.dry_run = dry_run

    def _should_echo(self, command: Command) -> bool:
        if self.quiet:
            return False
        return self.dry_run or not command.silent

    def run(self, plan: Plan) -> ExecutionResult:
        result = ExecutionResult(
            plan, [CommandResult(n, step) for n, step in enumerate(plan, start=1)]
        )

        for command_result in result.commands:
            command = command_result.command
            if self._should_echo(command):
                self.echo(command_result.step)
            if self.dry_run:
                continue

            command_result.state = CommandState.RUNNING
            returncode = self.spawner.spawn(command.text, self.environment)
            command_result.returncode = returncode

            if returncode == 0:
                command_result.state = CommandState.SUCCEEDED
                continue

            command_result.state = CommandState.FAILED
            if command.ignore_errors:
                log.debug("Ignoring failure of command %d (returncode: %d)",
                          command_result.index, returncode)
                continue

            result.state = PlanState.ABORTED
            return result

        result.state = PlanState.COMPLETED
        return result


# --------------------------------------------------------------------
def execute(
    plan: Plan,
    environment: Optional[ShellEnvironment] = None,
    spawner: Optional[Spawner] = None,
) -> int:
    """ Run the plan and return the exit code of the invocation. """
    return Executor(environment, spawner).run(plan).returncode
