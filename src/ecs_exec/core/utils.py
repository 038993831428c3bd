"""Utility functions for ecs-exec."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from typing import TYPE_CHECKING, Literal, TypeVar

from rich.spinner import Spinner

if TYPE_CHECKING:
    from mypy_boto3_ecs.client import ECSClient
    from rich.console import Console

T = TypeVar("T")


def extract_name_from_arn(arn: str) -> str:
    """Extract resource name from AWS ARN."""
    return arn.split("/")[-1]


def print_success(message: str, target: Console) -> None:
    target.print(f"✅ {message}", style="green", highlight=False)


def print_info(message: str, target: Console) -> None:
    target.print(message, style="blue", highlight=False)


@contextmanager
def show_spinner(target: Console) -> Iterator[None]:
    """Context manager that shows a spinner while running operations."""
    spinner = Spinner("dots", style="cyan")
    with target.status(spinner):
        yield


def batch_items(items: Sequence[T], size: int) -> Iterator[list[T]]:
    """Yield consecutive slices of at most ``size`` items."""
    for start in range(0, len(items), size):
        yield list(items[start : start + size])


def paginate_aws_list(
    client: ECSClient,
    operation_name: Literal["list_clusters", "list_tasks"],
    result_key: str,
    **kwargs: str,
) -> list[str]:
    paginator = client.get_paginator(operation_name)  # type: ignore[no-matching-overload]
    page_iterator = paginator.paginate(**kwargs)

    results: list[str] = []
    for page in page_iterator:
        results.extend(page.get(result_key, []))

    return results
