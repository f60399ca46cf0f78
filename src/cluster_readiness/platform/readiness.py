# Copyright 2025 iGenius S.p.A
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

from collections.abc import Sequence
from dataclasses import dataclass
import time
from typing import Callable

from rich.markup import escape

from cluster_readiness.exceptions import ReadinessTimeout
from cluster_readiness.helpers.logger import setup_logger
from cluster_readiness.platform.health_checks import from_single_service_check
from cluster_readiness.platform.protocols import (
    Cluster,
    ClusterHealthCheck,
    MultiServiceHealthCheck,
    SingleServiceHealthCheck,
)
from cluster_readiness.platform.results import SuccessOrFailure

POLL_INTERVAL_S = 0.05
DID_NOT_FINISH_MESSAGE = "The healthcheck did not finish before the timeout"

logger = setup_logger(__name__)


@dataclass(frozen=True)
class ServicesTarget:
    """Named containers checked together by one multi-service check."""

    names: tuple[str, ...]
    check: MultiServiceHealthCheck


@dataclass(frozen=True)
class ClusterTarget:
    """The cluster as a whole, checked without per-container resolution."""

    check: ClusterHealthCheck


ReadinessTarget = ServicesTarget | ClusterTarget


def describe_target(target: ReadinessTarget) -> str:
    match target:
        case ServicesTarget(names=names):
            noun = "Containers" if len(names) > 1 else "Container"
            return f"{noun} '[{', '.join(names)}]'"
        case ClusterTarget():
            return "Cluster"


def startup_failure_message(target: ReadinessTarget, last_result: SuccessOrFailure | None) -> str:
    """Render the diagnostic raised when the deadline passes without success."""
    body = last_result.failure_message() if last_result is not None else None
    if body is None:
        body = DID_NOT_FINISH_MESSAGE
    return f"{describe_target(target)} failed to pass startup check:\n{body}"


@dataclass(frozen=True)
class ReadinessWaiter:
    """
    Bounded readiness gate over a cluster of externally managed containers.

    The configured check is evaluated every ``POLL_INTERVAL_S`` seconds until
    it succeeds or ``timeout_s`` elapses. Named containers are resolved from
    the cluster again on every attempt, so containers that do not exist yet,
    or that restart while waiting, are picked up in their current state.

    A waiter holds no per-call state: the same instance can be used for any
    number of concurrent ``wait_until_ready`` calls.
    """

    target: ReadinessTarget
    timeout_s: float

    @classmethod
    def for_service(
        cls, name: str, check: SingleServiceHealthCheck, timeout_s: float
    ) -> "ReadinessWaiter":
        return cls(ServicesTarget((name,), from_single_service_check(check)), timeout_s)

    @classmethod
    def for_services(
        cls, names: Sequence[str], check: MultiServiceHealthCheck, timeout_s: float
    ) -> "ReadinessWaiter":
        return cls(ServicesTarget(tuple(names), check), timeout_s)

    @classmethod
    def for_cluster(cls, check: ClusterHealthCheck, timeout_s: float) -> "ReadinessWaiter":
        return cls(ClusterTarget(check), timeout_s)

    def _evaluate(self, cluster: Cluster) -> SuccessOrFailure:
        match self.target:
            case ServicesTarget(names=names, check=check):
                return check([cluster.container(name) for name in names])
            case ClusterTarget(check=check):
                return check(cluster)

    def wait_until_ready(
        self,
        cluster: Cluster,
        *,
        now: Callable[[], float] = time.monotonic,  # injectable clock
        sleep: Callable[[float], None] = time.sleep,  # injectable sleeper
    ) -> None:
        """
        Block until the check succeeds against ``cluster``.

        Exceptions raised by the check or by container resolution are not
        retried and propagate immediately.

        Raises:
            ReadinessTimeout: if ``timeout_s`` elapses first. An evaluation
                that completes at or after the deadline does not count.
        """
        match self.target:
            case ServicesTarget(names=names):
                logger.debug(escape(f"Waiting for services [{', '.join(names)}]"))
            case ClusterTarget():
                logger.debug("Waiting for cluster health check")

        start = now()
        deadline = start + self.timeout_s
        last_result: SuccessOrFailure | None = None
        attempts = 0
        while True:
            attempts += 1
            result = self._evaluate(cluster)
            if now() >= deadline:
                break
            last_result = result
            if result.succeeded():
                logger.info(
                    f"{escape(describe_target(self.target))} ready after {attempts} attempt(s) "
                    f"in {now() - start:.2f}s"
                )
                return
            sleep(POLL_INTERVAL_S)
            if now() >= deadline:
                break

        raise ReadinessTimeout(startup_failure_message(self.target, last_result), last_result)
