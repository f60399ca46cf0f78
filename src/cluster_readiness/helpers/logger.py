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

import logging
import sys

from rich.console import Console
from rich.logging import RichHandler

from cluster_readiness.config.settings import get_settings


def _rich_handler(level: int | str, console: Console, rich_tracebacks: bool) -> RichHandler:
    return RichHandler(
        level=level,
        console=console,
        rich_tracebacks=rich_tracebacks,
        markup=True,
        show_time=True,
        show_level=True,
        show_path=False,
    )


def setup_logger(
    name: str = "cluster_readiness",
    level: int | str | None = None,
    console: Console | None = None,
    to_stderr: bool = False,
) -> logging.Logger:
    """Return a Rich-backed logger, configuring it on first use.

    When ``level`` is omitted it is read from ``CLUSTER_READINESS_LOG_LEVEL``.
    Output goes entirely to stderr when stdout is not a terminal, so that
    test-runner captures and piped output stay clean.
    """
    if level is None:
        level = get_settings().log_level.upper()

    machine_mode = not sys.stdout.isatty()
    to_stderr = to_stderr or machine_mode

    logger = logging.getLogger(name)
    logger.setLevel(level)
    logger.propagate = False  # Avoid duplicate logs

    if logger.handlers:
        return logger

    stdout_console = console or Console()
    stderr_console = Console(stderr=True)

    if to_stderr:
        logger.addHandler(_rich_handler(level, stderr_console, rich_tracebacks=True))
        return logger

    # Info and below → stdout
    stdout_handler = _rich_handler(logging.DEBUG, stdout_console, rich_tracebacks=False)
    stdout_handler.addFilter(lambda record: record.levelno <= logging.INFO)

    # Warnings and above → stderr
    stderr_handler = _rich_handler(logging.WARNING, stderr_console, rich_tracebacks=True)

    logger.addHandler(stdout_handler)
    logger.addHandler(stderr_handler)

    return logger
