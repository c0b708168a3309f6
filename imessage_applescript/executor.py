# ============================================================================
# CHANGELOG (recent first, max 5 entries)
# 10/19/2026 - Kill and reap osascript when the awaiting task is cancelled
# 10/18/2026 - Created with semaphore bound and timeout
# ============================================================================
"""
Runs AppleScript through osascript as an asyncio child process.

Each call suspends only the awaiting task. The number of concurrent
osascript processes is bounded by a semaphore, and every call is subject
to a timeout after which the child is killed.
"""

import asyncio
import logging
import shutil
from typing import Optional

from .utils.errors import ServerError

logger = logging.getLogger(__name__)


class AppleScriptError(ServerError):
    """osascript failed to start, exited non-zero, or timed out."""

    def __init__(self, detail: str):
        super().__init__(f"AppleScript error: {detail}")
        self.detail = detail


class AppleScriptExecutor:
    """
    Executes AppleScript source with osascript.

    Stdout is the only data channel. Output written before a failure is
    discarded, and failures are never retried.
    """

    def __init__(
        self,
        osascript_path: str = "osascript",
        timeout: Optional[float] = 30,
        max_concurrent: int = 4,
    ):
        """
        Initialize AppleScriptExecutor.

        Args:
            osascript_path: Interpreter binary (name on PATH or absolute path)
            timeout: Seconds to wait for a single script; None waits forever
            max_concurrent: Maximum number of osascript processes at once
        """
        if max_concurrent < 1:
            raise ValueError(f"max_concurrent must be at least 1, got {max_concurrent}")
        self.osascript_path = osascript_path
        self.timeout = timeout
        self.max_concurrent = max_concurrent
        self._semaphore = asyncio.Semaphore(max_concurrent)

    @classmethod
    def from_config(cls, config: dict) -> "AppleScriptExecutor":
        """Create an executor from the "applescript" config section."""
        section = config.get("applescript", {})
        return cls(
            osascript_path=section.get("osascript_path", "osascript"),
            timeout=section.get("timeout_seconds", 30),
            max_concurrent=section.get("max_concurrent", 4),
        )

    def is_available(self) -> bool:
        """Check whether the osascript binary can be found."""
        return shutil.which(self.osascript_path) is not None

    async def run(self, script: str) -> str:
        """
        Run a script and return its stripped stdout.

        Args:
            script: AppleScript source, passed as a single -e argument

        Returns:
            Stdout of the script with surrounding whitespace removed

        Raises:
            AppleScriptError: on spawn failure, non-zero exit, or timeout
        """
        logger.debug(f"Running AppleScript:\n{script}")

        async with self._semaphore:
            try:
                process = await asyncio.create_subprocess_exec(
                    self.osascript_path, '-e', script,
                    stdout=asyncio.subprocess.PIPE,
                    stderr=asyncio.subprocess.PIPE,
                )
            except OSError as e:
                logger.error(f"Could not start {self.osascript_path}: {e}")
                raise AppleScriptError(f"could not start {self.osascript_path}: {e}") from e

            try:
                stdout, stderr = await asyncio.wait_for(
                    process.communicate(),
                    timeout=self.timeout,
                )
            except asyncio.TimeoutError:
                await self._terminate(process)
                logger.error(f"AppleScript timed out after {self.timeout} seconds")
                raise AppleScriptError(f"timed out after {self.timeout} seconds")
            except asyncio.CancelledError:
                # The child must not outlive the semaphore slot it holds
                await self._terminate(process)
                logger.info("AppleScript cancelled, osascript killed")
                raise

        if process.returncode != 0:
            detail = stderr.decode("utf-8", errors="replace").strip()
            if not detail:
                detail = f"osascript exited with status {process.returncode}"
            raise AppleScriptError(detail)

        return stdout.decode("utf-8", errors="replace").strip()

    @staticmethod
    async def _terminate(process) -> None:
        """Kill a running osascript child and reap it."""
        if process.returncode is None:
            try:
                process.kill()
            except ProcessLookupError:
                pass
        await process.wait()
