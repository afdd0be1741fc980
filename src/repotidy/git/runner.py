"""Async runner for the git CLI."""

from __future__ import annotations

import asyncio
import contextlib
import logging
import shutil
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from .utils import format_command, sanitize_environment

logger = logging.getLogger(__name__)


class GitRunnerError(RuntimeError):
    """Base class for git runner errors."""


class GitNotFoundError(GitRunnerError):
    """Raised when the git executable cannot be located."""


class GitCommandError(GitRunnerError):
    """Raised when a checked git command exits with a non-zero status."""

    def __init__(self, result: "GitExecutionResult") -> None:
        self.result = result
        detail = result.stderr.strip() or result.stdout.strip() or "no output"
        super().__init__(
            f"`{format_command(result.args)}` exited with code {result.returncode}: {detail}"
        )


@dataclass(slots=True)
class GitExecutionResult:
    """Holds the outcome of a git invocation."""

    args: tuple[str, ...]
    returncode: int
    stdout: str
    stderr: str

    @property
    def ok(self) -> bool:
        return self.returncode == 0


class GitRunner:
    """Execute git commands asynchronously."""

    def __init__(self, executable: Path | None = None) -> None:
        self._executable_path = self._resolve_executable(executable)

    @staticmethod
    def _resolve_executable(explicit: Path | None) -> Path:
        if explicit is not None:
            candidate = Path(explicit)
            if candidate.exists() and candidate.is_file():
                return candidate
            raise GitNotFoundError(f"git executable not found at {candidate}")

        binary = shutil.which("git")
        if binary is None:
            raise GitNotFoundError("git executable not found on PATH")
        return Path(binary)

    @property
    def executable(self) -> Path:
        return self._executable_path

    async def run(
        self,
        *args: str,
        cwd: Path | str,
        check: bool = False,
        echo: bool = False,
    ) -> GitExecutionResult:
        """Run ``git <args>`` inside ``cwd``.

        With ``check`` a non-zero exit raises :class:`GitCommandError`. With
        ``echo`` the command's own stdout and stderr are written through to the
        console once it finishes.
        """

        logger.debug("Running git %s in %s", format_command(args), cwd)
        result = await self._invoke(args, Path(cwd))
        if echo:
            if result.stdout:
                sys.stdout.write(result.stdout)
            if result.stderr:
                sys.stderr.write(result.stderr)
        if check and not result.ok:
            raise GitCommandError(result)
        return result

    async def _invoke(self, args: tuple[str, ...], cwd: Path) -> GitExecutionResult:
        cmd = [str(self._executable_path), *args]
        process = await asyncio.create_subprocess_exec(
            *cmd,
            cwd=str(cwd),
            stdin=asyncio.subprocess.DEVNULL,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
            env=sanitize_environment(),
        )
        try:
            stdout_bytes, stderr_bytes = await process.communicate()
        except asyncio.CancelledError:
            # A cancelled wait leaves the child running; stop it before unwinding.
            with contextlib.suppress(ProcessLookupError):
                process.kill()
            await process.wait()
            raise
        stdout = stdout_bytes.decode("utf-8", errors="replace")
        stderr = stderr_bytes.decode("utf-8", errors="replace")
        return GitExecutionResult(args=tuple(cmd), returncode=process.returncode, stdout=stdout, stderr=stderr)


class FakeGitRunner(GitRunner):
    """Test double that answers git commands from a table of canned results.

    Commands without an entry succeed with empty output.
    """

    def __init__(  # type: ignore[override]
        self,
        responses: Mapping[tuple[str, ...], GitExecutionResult] | None = None,
    ) -> None:
        self._responses = dict(responses or {})
        self._invocations: list[tuple[str, ...]] = []
        self._executable_path = Path("/tmp/fake-git")

    def respond(self, args: tuple[str, ...], *, stdout: str = "", stderr: str = "", returncode: int = 0) -> None:
        self._responses[tuple(args)] = GitExecutionResult(
            args=("git", *args), returncode=returncode, stdout=stdout, stderr=stderr
        )

    async def _invoke(self, args: tuple[str, ...], cwd: Path) -> GitExecutionResult:  # type: ignore[override]
        self._invocations.append(tuple(args))
        await asyncio.sleep(0)
        if args in self._responses:
            return self._responses[args]
        return GitExecutionResult(args=("git", *args), returncode=0, stdout="", stderr="")

    @property
    def invocations(self) -> list[tuple[str, ...]]:
        return self._invocations
