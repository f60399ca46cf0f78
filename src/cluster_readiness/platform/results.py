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

"""Outcome of a single health-check evaluation.

A health check never raises for an ordinary "not ready yet" condition: it
returns ``Failure(message)`` instead, and ``Success()`` once the target is
usable. ``on_result_of`` turns a raising probe into that shape.
"""

from dataclasses import dataclass
from typing import Callable


@dataclass(frozen=True)
class Success:
    def succeeded(self) -> bool:
        return True

    def failed(self) -> bool:
        return False

    def failure_message(self) -> str | None:
        return None


@dataclass(frozen=True)
class Failure:
    message: str

    def succeeded(self) -> bool:
        return False

    def failed(self) -> bool:
        return True

    def failure_message(self) -> str | None:
        return self.message


SuccessOrFailure = Success | Failure


def from_boolean(succeeded: bool, message_if_failure: str) -> SuccessOrFailure:
    return Success() if succeeded else Failure(message_if_failure)


def on_result_of(attempt: Callable[[], bool]) -> SuccessOrFailure:
    """Run ``attempt`` and encode its outcome.

    Exceptions raised by ``attempt`` become a ``Failure`` naming the exception
    type and message; a falsy return becomes a generic ``Failure``.
    """
    try:
        ok = attempt()
    except Exception as e:
        return Failure(f"{type(e).__name__}: {e}")
    return from_boolean(bool(ok), "Attempt to complete healthcheck failed")
