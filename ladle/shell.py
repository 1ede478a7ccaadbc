# --------------------------------------------------------------------
# shell.py: Shell environments and child process spawners.
#
# Author: Lain Musgrove (lain.proliant@gmail.com)
# Date: Saturday, October 17 2026
#
# Distributed under terms of the MIT license.
# --------------------------------------------------------------------
import os
import shlex
import subprocess
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

from .config import DEFAULT_SHELL, DEFAULT_SHELL_ARGS, Config

# --------------------------------------------------------------------
log = Config.get().get_logger(__name__)


# --------------------------------------------------------------------
@dataclass(frozen=True)
class ShellEnvironment:
    """ The process-wide state a command runs with, passed explicitly. """

    cwd: Path
    env: Mapping[str, str] = field(default_factory=dict)
    shell: str = DEFAULT_SHELL
    shell_args: Tuple[str, ...] = DEFAULT_SHELL_ARGS

    @classmethod
    def inherit(
        cls,
        cwd: Optional[Path] = None,
        overrides: Optional[Mapping[str, str]] = None,
        shell: Optional[str] = None,
    ) -> "ShellEnvironment":
        """Snapshot the invoking process's working directory and
        environment, applying any variable overrides."""
        shell_name, *shell_args = shlex.split(shell) if shell else [DEFAULT_SHELL]
        environment = cls(
            cwd=Path(cwd) if cwd is not None else Path.cwd(),
            env=dict(os.environ),
            shell=shell_name,
            shell_args=tuple(shell_args) if shell_args else DEFAULT_SHELL_ARGS,
        )
        return environment.with_env(**(overrides or {}))

    def with_env(self, **kwargs) -> "ShellEnvironment":
        return replace(self, env={**self.env, **kwargs})

    def argv(self, command: str) -> List[str]:
        return [self.shell, *self.shell_args, command]


# --------------------------------------------------------------------
def normalize_returncode(returncode: int) -> int:
    """Map a negative (killed by signal) return code onto the
    conventional `128 + signal` shell exit status."""
    if returncode < 0:
        return 128 - returncode
    return returncode


# -------------------------------------------------------------------
class Spawner:
    """ Runs a single command to completion and returns its exit status. """

    def spawn(self, command: str, environment: ShellEnvironment) -> int:
        raise NotImplementedError()


# -------------------------------------------------------------------
class SubprocessSpawner(Spawner):
    """Runs commands through the configured shell, inheriting the standard
    streams of this process and blocking until the command exits."""

    def spawn(self, command: str, environment: ShellEnvironment) -> int:
        argv = environment.argv(command)
        log.debug("Spawning %s in %s", argv, environment.cwd)
        returncode = subprocess.call(
            argv, cwd=environment.cwd, env=dict(environment.env)
        )
        return normalize_returncode(returncode)


# -------------------------------------------------------------------
class RecordingSpawner(Spawner):
    """Records each command instead of running it, answering with
    preset return codes.  Commands not listed in `returncodes` succeed."""

    def __init__(self, returncodes: Optional[Dict[str, int]] = None,
                 sequence: Optional[Sequence[int]] = None):
        self.returncodes = dict(returncodes or {})
        self.sequence = list(sequence or [])
        self.calls: List[Tuple[str, ShellEnvironment]] = []

    @property
    def commands(self) -> List[str]:
        return [command for command, _ in self.calls]

    def spawn(self, command: str, environment: ShellEnvironment) -> int:
        self.calls.append((command, environment))
        if self.sequence:
            return self.sequence.pop(0)
        return self.returncodes.get(command, 0)
