# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""User-facing error notifications raised when Credo fails."""

from __future__ import annotations

import logging

from .constants import (
    DISMISS_ACTION,
    NOTIFICATION_ID,
    NOTIFICATION_TITLE,
    PROJECT_SETTINGS_ACTION,
    PROJECT_SETTINGS_ACTION_INDEX,
)
from .core.models import NotificationRequest
from .interfaces.host import Notifier, Workspace

LOGGER = logging.getLogger(__name__)


def build_error_request(stderr: str) -> NotificationRequest:
    """Return the notification shown when Credo writes to stderr."""

    return NotificationRequest(
        identifier=NOTIFICATION_ID,
        title=NOTIFICATION_TITLE,
        body=f"{stderr}\nPlease check your configuration.",
        actions=(DISMISS_ACTION, PROJECT_SETTINGS_ACTION),
    )


async def notify_tool_error(notifier: Notifier, workspace: Workspace, stderr: str) -> None:
    """Show the Credo error notification and honour the chosen action.

    Choosing "Project Settings" opens the workspace configuration. Failures
    raised by the notifier are logged and not propagated.

    Args:
        notifier: Host notification service.
        workspace: Workspace whose configuration may be opened.
        stderr: Error text reported by Credo.
    """

    try:
        response = await notifier.add(build_error_request(stderr))
    except Exception as exc:  # noqa: BLE001 - host notifier failures must not abort analysis
        LOGGER.error("Credo notification failed: %s", exc)
        return
    if response.action_idx == PROJECT_SETTINGS_ACTION_INDEX:
        workspace.open_config()


__all__ = ["build_error_request", "notify_tool_error"]
