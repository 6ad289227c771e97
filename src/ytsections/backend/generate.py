"""Command-line entry for generating a download command."""

from __future__ import annotations

import logging
import sys
from functools import partial
from typing import TYPE_CHECKING, Annotated

from cyclopts import Parameter

from ytsections.models import Options
from ytsections.tools import emit_status

from .builder import build_from_options

if TYPE_CHECKING:
    from collections.abc import Callable
else:
    from collections import abc

    Callable = abc.Callable

logger = logging.getLogger(__name__)


def ytsections(
    opts: Options,
    status_callback: Annotated[Callable[[str], None] | None, Parameter(show=False)] = None,  # type: ignore[call-arg]
) -> int:
    """Print a yt-dlp command that downloads a section of a YouTube video."""
    logging.basicConfig(level=opts.runtime.verbosity.log_level, format="%(levelname)s: %(message)s")
    status_func = print if status_callback is None else status_callback
    try:
        command = build_from_options(opts)
    except ValueError as e:
        logger.debug("Failed to build command", exc_info=True)
        err_func = partial(print, file=sys.stderr, flush=True) if status_callback is None else status_callback
        err_func(f"Error: {e}")
        return 1
    emit_status(command, status_callback=status_func)
    return 0
