"""NodeSandbox — runs untrusted JavaScript in a throwaway Node.js process.

Uses the ``node`` executable via subprocess, one process per call.  Each
``run()`` or ``check()``:

1. Creates a private temporary working directory.
2. Starts ``node`` on the bundled ``harness.js`` with an empty environment,
   a capped heap, string code generation disabled and, where the runtime
   supports it, the permission model on (only the harness file is readable;
   writes, child processes and workers are refused).
3. Streams the harness's newline-delimited JSON events into the caller's
   :class:`~coderunner.sandbox.capture.OutputCapture`.
4. Kills and reaps the process and removes the directory in a ``finally``
   block, whatever the outcome.

Inside the process the code runs in a fresh ``vm`` context that only holds
the language intrinsics, a ``console`` bound to the capture stream and the
read-only ``input`` string.
"""

from __future__ import annotations

import asyncio
import json
import logging
import re
import shutil
import tempfile
from pathlib import Path
from typing import Any

from coderunner.config import RunnerSettings
from coderunner.errors import (
    ExecutionTimeoutError,
    OutputLimitExceededError,
    RuntimeFaultError,
    RuntimeUnavailableError,
)
from coderunner.sandbox.capture import OutputCapture
from coderunner.sandbox.values import decode_value

logger = logging.getLogger(__name__)

HARNESS_PATH = Path(__file__).resolve().with_name("harness.js")

# Room for the JSON envelope around the largest permitted console line.
_LINE_OVERHEAD = 64 * 1024

_VERSION_RE = re.compile(r"v?(\d+)\.(\d+)")


def parse_node_version(text: str) -> tuple[int, int]:
    """Return ``(major, minor)`` from ``node --version`` output, ``(0, 0)`` if unknown."""
    match = _VERSION_RE.search(text)
    if match is None:
        return (0, 0)
    return (int(match.group(1)), int(match.group(2)))


def permission_flag(version: tuple[int, int]) -> str | None:
    """Return the flag that turns on Node's permission model, if it has one.

    The model is ``--experimental-permission`` from Node 20 and became
    ``--permission`` in 22.13 and 23.5.
    """
    if version >= (23, 5) or (22, 13) <= version < (23, 0):
        return "--permission"
    if version >= (20, 0):
        return "--experimental-permission"
    return None


class _Outcome:
    """Terminal state reported by one harness run."""

    __slots__ = ("finished", "fault", "timed_out")

    def __init__(self) -> None:
        self.finished = False
        self.fault: str | None = None
        self.timed_out = False


class NodeSandbox:
    """Per-call isolated JavaScript runtime.

    Holds no per-call state, so one instance can serve concurrent calls;
    every call gets its own process, directory and ``vm`` context.
    """

    def __init__(self, settings: RunnerSettings | None = None) -> None:
        self._settings = settings or RunnerSettings()
        self._version: tuple[int, int] | None = None

    @property
    def settings(self) -> RunnerSettings:
        return self._settings

    def resolve_binary(self) -> str:
        """Return the absolute path of the node executable.

        Raises:
            RuntimeUnavailableError: If the executable is not on ``PATH``.
        """
        binary = shutil.which(self._settings.node_binary)
        if binary is None:
            raise RuntimeUnavailableError(self._settings.node_binary)
        return binary

    async def runtime_version(self) -> tuple[int, int]:
        """Return the ``(major, minor)`` version of node, read once per instance."""
        if self._version is None:
            binary = self.resolve_binary()
            try:
                proc = await asyncio.create_subprocess_exec(
                    binary,
                    "--version",
                    stdout=asyncio.subprocess.PIPE,
                    stderr=asyncio.subprocess.DEVNULL,
                    env={},
                )
                stdout, _ = await proc.communicate()
            except OSError as exc:
                raise RuntimeUnavailableError(binary) from exc
            self._version = parse_node_version(stdout.decode(errors="replace"))
            if permission_flag(self._version) is None:
                logger.warning(
                    "node %s.%s has no permission model; the sandbox relies on vm isolation only",
                    *self._version,
                )
        return self._version

    async def run(
        self,
        code: str,
        capture: OutputCapture,
        *,
        input_text: str = "",
        timeout_ms: int | None = None,
    ) -> None:
        """Run *code*, appending everything it prints to *capture*.

        Raises:
            ExecutionTimeoutError: The wall-clock budget was exceeded.
            RuntimeFaultError: The code threw, or the runtime died.
            RuntimeUnavailableError: node could not be started.
        """
        budget = timeout_ms or self._settings.execution_timeout_ms
        request = {"mode": "run", "code": code, "input": input_text, "timeoutMs": budget}

        outcome = await self._invoke(request, capture, budget)

        if outcome.timed_out:
            raise ExecutionTimeoutError(budget)
        if outcome.fault is not None:
            raise RuntimeFaultError(outcome.fault)

    async def check(self, code: str) -> str | None:
        """Compile *code* as a function body without running it.

        Returns the syntax error message, or ``None`` when the code parses.
        """
        budget = self._settings.execution_timeout_ms
        outcome = await self._invoke({"mode": "check", "code": code}, OutputCapture(), budget)
        if outcome.timed_out:
            raise ExecutionTimeoutError(budget)
        return outcome.fault

    async def _invoke(
        self,
        request: dict[str, Any],
        capture: OutputCapture,
        budget_ms: int,
    ) -> _Outcome:
        binary = self.resolve_binary()
        flags = self._node_flags(await self.runtime_version())
        payload = json.dumps(request).encode("utf-8")
        deadline = (budget_ms + self._settings.startup_grace_ms) / 1000
        outcome = _Outcome()

        with tempfile.TemporaryDirectory(prefix="coderunner-") as workdir:
            cmd = [binary, *flags, str(HARNESS_PATH)]
            logger.debug("Starting sandbox: %s", cmd)
            try:
                proc = await asyncio.create_subprocess_exec(
                    *cmd,
                    stdin=asyncio.subprocess.PIPE,
                    stdout=asyncio.subprocess.PIPE,
                    stderr=asyncio.subprocess.PIPE,
                    cwd=workdir,
                    env={},
                    limit=self._settings.max_output_bytes + _LINE_OVERHEAD,
                )
            except OSError as exc:
                raise RuntimeUnavailableError(binary) from exc

            try:
                await asyncio.wait_for(
                    self._drive(proc, payload, capture, outcome),
                    timeout=deadline,
                )
            except TimeoutError:
                logger.warning("Sandbox pid %s exceeded %sms, killing it", proc.pid, budget_ms)
                outcome.timed_out = True
            finally:
                await self._terminate(proc)

        return outcome

    async def _drive(
        self,
        proc: asyncio.subprocess.Process,
        payload: bytes,
        capture: OutputCapture,
        outcome: _Outcome,
    ) -> None:
        assert proc.stdin is not None and proc.stdout is not None and proc.stderr is not None

        try:
            proc.stdin.write(payload)
            await proc.stdin.drain()
            proc.stdin.close()
        except (BrokenPipeError, ConnectionResetError):
            logger.debug("Sandbox closed stdin before the request was written")

        stderr_task = asyncio.ensure_future(proc.stderr.read())
        try:
            await self._pump(proc.stdout, capture, outcome)
            stderr = await stderr_task
        finally:
            if not stderr_task.done():
                stderr_task.cancel()
        returncode = await proc.wait()

        if outcome.finished:
            return

        diagnostics = stderr.decode(errors="replace")
        logger.debug("Sandbox exited with %s without a result: %s", returncode, diagnostics)
        if "heap out of memory" in diagnostics:
            raise RuntimeFaultError("memory limit exceeded")
        raise RuntimeFaultError(f"runtime exited unexpectedly (exit code {returncode})")

    async def _pump(
        self,
        stream: asyncio.StreamReader,
        capture: OutputCapture,
        outcome: _Outcome,
    ) -> None:
        while True:
            try:
                raw = await stream.readline()
            except ValueError as exc:
                # A single line longer than the stream limit.
                raise OutputLimitExceededError(self._settings.max_output_bytes) from exc
            if not raw:
                return
            self._handle_event(raw, capture, outcome)

    @staticmethod
    def _handle_event(raw: bytes, capture: OutputCapture, outcome: _Outcome) -> None:
        try:
            event = json.loads(raw.decode("utf-8", errors="replace"))
        except ValueError:
            logger.debug("Ignoring non-protocol sandbox line: %r", raw[:200])
            return
        if not isinstance(event, dict):
            return

        kind = event.get("type")
        if kind == "console":
            args = event.get("args") or []
            capture.console(str(event.get("level", "log")), [decode_value(a) for a in args])
        elif kind == "result":
            capture.result(decode_value(event.get("value")))
        elif kind == "fault":
            outcome.fault = str(event.get("message", ""))
            outcome.finished = True
        elif kind == "timeout":
            outcome.timed_out = True
            outcome.finished = True
        elif kind == "done":
            outcome.finished = True

    def _node_flags(self, version: tuple[int, int]) -> list[str]:
        flags = [
            "--disallow-code-generation-from-strings",
            f"--max-old-space-size={self._settings.memory_limit_mb}",
        ]
        permission = permission_flag(version)
        if permission is not None:
            flags += [permission, f"--allow-fs-read={HARNESS_PATH}"]
        return flags

    @staticmethod
    async def _terminate(proc: asyncio.subprocess.Process) -> None:
        """Kill the process if it is still running and reap it."""
        if proc.returncode is None:
            try:
                proc.kill()
            except ProcessLookupError:
                pass
        await proc.wait()
