"""Diagnostic dump of the bounded vital, safe to call from anywhere."""
from __future__ import annotations

import logging
import traceback

from src.shared.constants import (
    DIAGNOSTICS_LABEL_PREFIX,
    DIAGNOSTICS_LINE_FORMAT,
    DIAGNOSTICS_LOGGER_NAME,
)
from src.shared_state.models import VitalSnapshot

logger = logging.getLogger(__name__)


def capture_hierarchy(skip: int = 0) -> str:
    """Return the calling context as formatted stack text.

    Args:
        skip: Number of innermost frames to drop in addition to this
            function's own frame.

    Returns:
        The stack, outermost frame first, without a trailing newline.
    """
    frames = traceback.format_stack()[: -(skip + 1)]
    return "".join(frames).rstrip("\n")


def format_vital_line(snapshot: VitalSnapshot, hierarchy: str) -> str:
    """Render the diagnostic text for ``snapshot``."""
    return DIAGNOSTICS_LINE_FORMAT.format(
        current=snapshot.current,
        maximum=snapshot.maximum,
        hierarchy=hierarchy,
    )


def emit_diagnostics(
    snapshot: VitalSnapshot,
    *,
    label: str | None = None,
    sink: logging.Logger | None = None,
    skip: int = 0,
) -> str:
    """Write the diagnostic text for ``snapshot`` to ``sink``.

    A failing sink is reported on this module's logger and never raised
    into the caller.

    Args:
        snapshot: Vital values to report.
        label: Optional caller-supplied label appended after the stack.
        sink: Logger receiving the line. Defaults to the diagnostics logger.
        skip: Extra innermost frames to leave out of the hierarchy.

    Returns:
        The text that was (or would have been) written.
    """
    hierarchy = capture_hierarchy(skip=skip + 1)
    if label:
        hierarchy = f"{hierarchy}\n{DIAGNOSTICS_LABEL_PREFIX}{label}"
    text = format_vital_line(snapshot, hierarchy)

    target = sink if sink is not None else logging.getLogger(DIAGNOSTICS_LOGGER_NAME)
    try:
        target.info(text, extra={"vital": snapshot.model_dump()})
    except Exception as exc:
        logger.warning("emit_diagnostics failed (non-blocking): %s", exc)
    return text
