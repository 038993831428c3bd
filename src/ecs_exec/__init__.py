import argparse
import sys
from importlib.metadata import PackageNotFoundError, version
from typing import TYPE_CHECKING

import boto3
from botocore.config import Config
from rich.console import Console

if TYPE_CHECKING:
    from mypy_boto3_ecs import ECSClient

from .core.app import run_exec_flow
from .core.errors import ECSExecError, StageError
from .features.exec.launcher import ExecLauncher
from .ui import ExecNavigator

try:
    __version__ = version("ecs-exec")
except PackageNotFoundError:
    __version__ = "dev"

DEFAULT_COMMAND = "sh"
DEFAULT_REGION = "ap-southeast-2"

console = Console()
err_console = Console(stderr=True)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Pick an ECS cluster, task and container, then exec into it")
    parser.add_argument("--version", action="version", version=f"ecs-exec {__version__}")
    parser.add_argument(
        "--command", help="the command to run inside the container", type=str, default=DEFAULT_COMMAND
    )
    parser.add_argument("--region", help="the AWS region", type=str, default=DEFAULT_REGION)
    parser.add_argument("--profile", help="AWS profile to use for authentication", type=str, default=None)
    return parser


def main() -> None:
    """Interactive AWS ECS exec tool."""
    args = build_parser().parse_args()

    try:
        ecs_client = _create_aws_client(args.region, args.profile)
    except Exception as e:
        err_console.print(f"\n❌ unable to load SDK config: {e}", style="red", markup=False)
        err_console.print("Make sure your AWS credentials are configured.", style="dim")
        sys.exit(1)

    navigator = ExecNavigator(ecs_client)
    launcher = ExecLauncher(region=args.region, profile=args.profile)

    try:
        exit_code = run_exec_flow(navigator, launcher, args.command)
    except KeyboardInterrupt:
        console.print("\n👋 Goodbye!", style="cyan")
        sys.exit(130)
    except StageError as e:
        err_console.print(f"\n❌ {e}", style="red", markup=False, highlight=False)
        sys.exit(e.exit_code)
    except ECSExecError as e:
        err_console.print(f"\n❌ Error: {e}", style="red", markup=False, highlight=False)
        sys.exit(1)

    sys.exit(exit_code)


def _create_aws_client(region_name: str, profile_name: str | None) -> "ECSClient":
    """Create the ECS client; SDK retries are disabled."""
    config = Config(
        max_pool_connections=5,
        retries={"max_attempts": 1, "mode": "standard"},
    )

    session = boto3.Session(region_name=region_name, profile_name=profile_name)
    return session.client("ecs", config=config)


if __name__ == "__main__":
    main()
