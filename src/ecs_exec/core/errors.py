"""Exception types raised while picking a container and launching a session."""

from __future__ import annotations


class ECSExecError(Exception):
    """Base class for all ecs-exec errors."""


class AWSCallError(ECSExecError):
    """A remote ECS API call failed."""

    def __init__(self, stage: str, cause: Exception) -> None:
        super().__init__(f"failed to {stage}: {cause}")
        self.stage = stage
        self.cause = cause


class InputReadError(ECSExecError):
    """Reading a line from the console failed."""


class SelectionError(ECSExecError):
    """The operator's selection could not be used."""


class SelectionParseError(SelectionError):
    """The selection was not a number."""


class SelectionOutOfRangeError(SelectionError):
    def __init__(self, index: int, count: int) -> None:
        super().__init__(f"selection out of range: {index} not in [0, {count})")
        self.index = index
        self.count = count


class NoResourcesError(ECSExecError):
    """There was nothing to choose from."""


class LaunchError(ECSExecError):
    """The exec session could not be started or exited with an error."""

    def __init__(self, message: str, returncode: int | None = None) -> None:
        super().__init__(message)
        self.returncode = returncode


class StageError(ECSExecError):
    """Wraps a failure with the pipeline stage it happened in."""

    def __init__(self, stage: str, cause: ECSExecError) -> None:
        super().__init__(f"error {stage}: {cause}")
        self.stage = stage
        self.cause = cause

    @property
    def exit_code(self) -> int:
        if isinstance(self.cause, LaunchError) and self.cause.returncode:
            returncode = self.cause.returncode
            # killed by signal N: report it the way a shell would
            return 128 - returncode if returncode < 0 else returncode
        return 1
