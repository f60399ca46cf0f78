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

from cluster_readiness.platform.protocols import (
    Container,
    MultiServiceHealthCheck,
    SingleServiceHealthCheck,
)
from cluster_readiness.platform.results import Failure, Success, SuccessOrFailure


def from_single_service_check(check: SingleServiceHealthCheck) -> MultiServiceHealthCheck:
    """Lift a single-container check to the multi-container shape.

    The lifted check only accepts exactly one container.
    """

    def _check(containers: Sequence[Container]) -> SuccessOrFailure:
        if len(containers) != 1:
            raise ValueError(
                f"Trying to run a single container health check on containers {list(containers)}"
            )
        return check(containers[0])

    return _check


def all_services(check: SingleServiceHealthCheck) -> MultiServiceHealthCheck:
    """Apply ``check`` to every container in order; the first failure wins."""

    def _check(containers: Sequence[Container]) -> SuccessOrFailure:
        for container in containers:
            result = check(container)
            if isinstance(result, Failure):
                return Failure(f"{container.name}: {result.message}")
        return Success()

    return _check
