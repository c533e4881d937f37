# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Run Credo against a single file and collect its findings."""

from __future__ import annotations

import logging

from .config.models import BridgeSettings
from .constants import FORMAT_ARGS
from .core.models import InspectionResult
from .core.runtime.process import CommandOptions
from .errors import ParseError, ToolExecutionError
from .interfaces.host import Notifier, ProcessLauncher, Workspace
from .mapper import summarize_priorities
from .notifications import notify_tool_error
from .parsers import parse_credo_output

LOGGER = logging.getLogger(__name__)


class CredoInvoker:
    """Invoke ``mix credo`` in the workspace root and parse its JSON report."""

    def __init__(
        self,
        launcher: ProcessLauncher,
        notifier: Notifier,
        workspace: Workspace,
        *,
        settings: BridgeSettings | None = None,
        options: CommandOptions | None = None,
    ) -> None:
        """Wire the invoker to its host services.

        Args:
            launcher: Service that runs the Credo command.
            notifier: Service used to report tool failures to the user.
            workspace: Workspace whose root becomes the working directory.
            settings: Command and option settings; defaults when omitted.
            options: Base process options such as the environment.
        """

        self._launcher = launcher
        self._notifier = notifier
        self._workspace = workspace
        self._settings = settings or BridgeSettings()
        self._options = options or CommandOptions()

    @property
    def settings(self) -> BridgeSettings:
        """Return the settings used to build the command."""

        return self._settings

    def build_command(self, file_path: str) -> tuple[str, ...]:
        """Return the argument vector used to inspect ``file_path``."""

        head = (self._settings.launcher,) if self._settings.launcher else ()
        return (
            *head,
            *self._settings.command,
            *FORMAT_ARGS,
            *self._settings.credo_options(),
            file_path,
        )

    async def inspect(self, file_path: str) -> InspectionResult:
        """Run Credo for ``file_path``.

        Any stderr output counts as a tool failure: stdout is discarded and
        the user is notified once. Unparseable stdout is logged only. Every
        path returns an :class:`InspectionResult`.

        Args:
            file_path: File handed to Credo, relative to the workspace root or absolute.

        Returns:
            InspectionResult: Parsed issues on success, the error otherwise.
        """

        args = self.build_command(file_path)
        LOGGER.info("Running Credo with `%s`", " ".join(args))
        options = self._options.with_overrides(cwd=self._workspace.path, timeout=self._settings.timeout)
        try:
            result = await self._launcher.run(args, options=options)
        except OSError as exc:
            return await self._tool_failure(ToolExecutionError(str(exc), command=args))

        if result.stderr:
            error = ToolExecutionError(result.stderr, returncode=result.returncode, command=args)
            return await self._tool_failure(error)

        try:
            issues = parse_credo_output(result.stdout)
        except ParseError as exc:
            LOGGER.error("Credo output could not be parsed: %s. Output: %s", exc.reason, exc.excerpt)
            return InspectionResult.failure(exc, returncode=result.returncode)

        summary = summarize_priorities(issues)
        LOGGER.info("%s", summary.render(f"Received {summary.total} issues from Credo:"))
        return InspectionResult.success(issues, returncode=result.returncode)

    async def _tool_failure(self, error: ToolExecutionError) -> InspectionResult:
        LOGGER.error("Credo ERROR: exit status=%s %s", error.returncode, error.stderr)
        await notify_tool_error(self._notifier, self._workspace, error.stderr)
        return InspectionResult.failure(error, stderr=error.stderr, returncode=error.returncode)


__all__ = ["CredoInvoker"]
