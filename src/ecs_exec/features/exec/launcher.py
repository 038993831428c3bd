"""Launches ``aws ecs execute-command`` sessions."""

from __future__ import annotations

import os
import shutil
import subprocess
from collections.abc import Callable, Mapping

from ...core.errors import LaunchError
from ...core.types import Cluster, Container, Task

AWS_CLI = "aws"

Runner = Callable[..., subprocess.CompletedProcess]


class ExecLauncher:
    """Runs an interactive exec session wired to the current terminal."""

    def __init__(
        self,
        region: str | None = None,
        profile: str | None = None,
        runner: Runner = subprocess.run,
        which: Callable[[str], str | None] = shutil.which,
    ) -> None:
        self.region = region
        self.profile = profile
        self._runner = runner
        self._which = which

    @staticmethod
    def build_command(cluster: Cluster, task: Task, container: Container, command: str) -> list[str]:
        return [
            AWS_CLI,
            "ecs",
            "execute-command",
            "--cluster",
            cluster.name,
            "--task",
            task.arn,
            "--container",
            container.name,
            "--interactive",
            "--command",
            command,
        ]

    def build_env(self, base: Mapping[str, str] | None = None) -> dict[str, str]:
        """Child environment, pinned to the region and profile the pickers used."""
        env = dict(os.environ if base is None else base)
        if self.region:
            env["AWS_REGION"] = self.region
            env["AWS_DEFAULT_REGION"] = self.region
        if self.profile:
            env["AWS_PROFILE"] = self.profile
        return env

    def launch(self, cluster: Cluster, task: Task, container: Container, command: str) -> int:
        """Run the session and block until it ends.

        stdin, stdout and stderr are inherited so the remote command behaves
        like a local interactive shell.
        """
        executable = self._which(AWS_CLI)
        if not executable:
            raise LaunchError(f"{AWS_CLI} CLI not found on PATH")

        args = self.build_command(cluster, task, container, command)
        args[0] = executable
        try:
            result = self._runner(args, env=self.build_env(), check=False)
        except OSError as e:
            raise LaunchError(f"failed to start {AWS_CLI}: {e}") from e

        if result.returncode != 0:
            raise LaunchError(f"exit status {result.returncode}", returncode=result.returncode)
        return 0
