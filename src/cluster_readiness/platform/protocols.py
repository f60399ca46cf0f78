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
from typing import Protocol

from cluster_readiness.platform.results import SuccessOrFailure


class Container(Protocol):
    """Opaque handle for one running service container.

    Only ``name`` is required here; health checks use whatever else the
    concrete inventory exposes (ports, IPs, exec, ...).
    """

    @property
    def name(self) -> str: ...


class Cluster(Protocol):
    """Inventory of the managed containers under test.

    ``container`` must raise (e.g. ``ContainerNotFoundError``) when the name is
    unknown at call time. It is called again on every poll, so the returned
    handle always reflects the current state of the container.
    """

    def container(self, name: str) -> Container: ...


class SingleServiceHealthCheck(Protocol):
    def __call__(self, container: Container) -> SuccessOrFailure: ...


class MultiServiceHealthCheck(Protocol):
    def __call__(self, containers: Sequence[Container]) -> SuccessOrFailure: ...


class ClusterHealthCheck(Protocol):
    def __call__(self, cluster: Cluster) -> SuccessOrFailure: ...
