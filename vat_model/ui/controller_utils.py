"""
Shared utilities for UI controller modules.
"""

from __future__ import annotations

import logging
import traceback
from typing import Any, Callable

logger = logging.getLogger(__name__)


def run_with_spinner_feedback(
    st_module: Any,
    spinner_message: str,
    error_prefix: str,
    action_fn: Callable[[], None],
    success_message: str | None = None,
) -> bool:
    """
    Execute an action with spinner, optional success feedback, and traceback on failure.
    """
    with st_module.spinner(spinner_message):
        try:
            action_fn()
        except Exception as e:
            logger.exception("%s", error_prefix)
            st_module.error(f"{error_prefix}: {e}")
            st_module.code(traceback.format_exc())
            return False

    if success_message:
        st_module.success(success_message)
    return True
