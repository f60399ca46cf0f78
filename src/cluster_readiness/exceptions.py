"""Custom exceptions."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cluster_readiness.platform.results import SuccessOrFailure


class ClusterReadinessError(Exception):
    """Base class for all custom exceptions.

    Useful to catch all of them.
    """


class ReadinessTimeout(ClusterReadinessError, TimeoutError):
    """The readiness deadline elapsed without a successful health check."""

    def __init__(self, message: str, last_result: "SuccessOrFailure | None" = None):
        """Raise the ReadinessTimeout.

        Args:
            message (str): Rendered, human-readable diagnostic.
            last_result (SuccessOrFailure | None): Last evaluation observed before
                the deadline, or None if none finished in time.
        """
        super().__init__(message)
        self.last_result = last_result


class ContainerNotFoundError(ClusterReadinessError, LookupError):
    """Container name not known to the cluster."""

    def __init__(self, container_name: str):
        """Raise the ContainerNotFoundError.

        Args:
            container_name (str): Name of the container that could not be resolved.
        """
        msg = f"Container '{container_name}' not found."
        super().__init__(msg)
        self.container_name = container_name
