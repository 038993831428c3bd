"""Tests for the exec session launcher."""

import subprocess
from unittest.mock import Mock

import pytest

from ecs_exec.core.errors import LaunchError
from ecs_exec.core.types import Cluster, Container
from ecs_exec.features.exec.launcher import ExecLauncher


@pytest.fixture
def target(make_task):
    cluster = Cluster(name="prod", arn="arn:aws:ecs:us-east-1:123:cluster/prod")
    task = make_task("arn:task/1", "web")
    return cluster, task, Container(name="web", task_arn="arn:task/1")


def _runner(returncode: int = 0) -> Mock:
    return Mock(side_effect=lambda args, **kwargs: subprocess.CompletedProcess(args, returncode))


def test_build_command(target):
    cluster, task, container = target

    args = ExecLauncher.build_command(cluster, task, container, "sh")

    assert args == [
        "aws",
        "ecs",
        "execute-command",
        "--cluster",
        "prod",
        "--task",
        "arn:task/1",
        "--container",
        "web",
        "--interactive",
        "--command",
        "sh",
    ]


def test_launch_runs_aws_cli_with_inherited_streams(target):
    runner = _runner()
    launcher = ExecLauncher(region="eu-west-1", runner=runner, which=lambda name: "/usr/bin/aws")

    assert launcher.launch(*target, "bash -l") == 0

    args, kwargs = runner.call_args
    assert args[0][0] == "/usr/bin/aws"
    assert args[0][-2:] == ["--command", "bash -l"]
    assert "stdin" not in kwargs
    assert "stdout" not in kwargs
    assert "stderr" not in kwargs
    assert kwargs["check"] is False


def test_launch_pins_region_and_profile(target):
    runner = _runner()
    launcher = ExecLauncher(region="eu-west-1", profile="ops", runner=runner, which=lambda name: "/usr/bin/aws")

    launcher.launch(*target, "sh")

    env = runner.call_args.kwargs["env"]
    assert env["AWS_REGION"] == "eu-west-1"
    assert env["AWS_DEFAULT_REGION"] == "eu-west-1"
    assert env["AWS_PROFILE"] == "ops"


def test_build_env_without_profile_keeps_base():
    env = ExecLauncher(region="us-east-1").build_env({"AWS_PROFILE": "default", "HOME": "/root"})

    assert env == {"AWS_PROFILE": "default", "HOME": "/root", "AWS_REGION": "us-east-1", "AWS_DEFAULT_REGION": "us-east-1"}


def test_launch_missing_aws_cli(target):
    runner = _runner()
    launcher = ExecLauncher(runner=runner, which=lambda name: None)

    with pytest.raises(LaunchError, match="not found on PATH"):
        launcher.launch(*target, "sh")

    runner.assert_not_called()


def test_launch_non_zero_exit(target):
    launcher = ExecLauncher(runner=_runner(255), which=lambda name: "/usr/bin/aws")

    with pytest.raises(LaunchError) as exc_info:
        launcher.launch(*target, "sh")

    assert exc_info.value.returncode == 255
    assert "exit status 255" in str(exc_info.value)


def test_launch_spawn_failure(target):
    runner = Mock(side_effect=PermissionError("permission denied"))
    launcher = ExecLauncher(runner=runner, which=lambda name: "/usr/bin/aws")

    with pytest.raises(LaunchError, match="failed to start aws"):
        launcher.launch(*target, "sh")
