"""External command runner."""
from __future__ import annotations

import asyncio
import logging
from typing import List, Optional, Sequence

from convertaphile.domain.models.result import ABNORMAL_EXIT_CODE, ConversionResult

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 60

_READ_CHUNK_SIZE = 64 * 1024


async def _drain(stream: Optional[asyncio.StreamReader], name: str) -> List[str]:
    """Read a pipe to EOF and return its lines."""
    if stream is None:
        return []

    chunks: List[bytes] = []
    try:
        while True:
            chunk = await stream.read(_READ_CHUNK_SIZE)
            if not chunk:
                break
            chunks.append(chunk)
    except Exception as exc:
        logger.warning(f"Error reading process {name}: {exc}")

    return b"".join(chunks).decode("utf-8", errors="replace").splitlines()


async def _kill(process: asyncio.subprocess.Process) -> None:
    try:
        process.kill()
    except ProcessLookupError:
        pass
    await process.wait()


async def run_command(cmd: Sequence[str], timeout: int = DEFAULT_TIMEOUT) -> ConversionResult:
    """
    Run an external command without a shell and capture its output.

    stdout and stderr are drained concurrently by two reader tasks so a
    chatty process never blocks on a full pipe. Both readers are awaited
    before the result is built, including after a timeout kill.

    Args:
        cmd: Executable followed by its arguments.
        timeout: Seconds to wait for the process to exit.

    Returns:
        ConversionResult. Timeouts and launch failures yield
        ``exit_code == -1``; this function does not raise.
    """
    try:
        process = await asyncio.create_subprocess_exec(
            *cmd,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
    except Exception as exc:
        logger.error(f"Exception during command execution: {exc}")
        return ConversionResult.failure(f"Exception during command execution: {exc}")

    stdout_task = asyncio.create_task(_drain(process.stdout, "stdout"))
    stderr_task = asyncio.create_task(_drain(process.stderr, "stderr"))

    timed_out = False
    try:
        await asyncio.wait_for(process.wait(), timeout=timeout)
    except asyncio.TimeoutError:
        timed_out = True
        await _kill(process)
    except Exception as exc:
        await _kill(process)
        stdout_lines, stderr_lines = await asyncio.gather(stdout_task, stderr_task)
        logger.error(f"Exception during command execution: {exc}")
        return ConversionResult.failure(
            "\n".join(stderr_lines + [f"Exception during command execution: {exc}"]),
            stdout="\n".join(stdout_lines),
        )

    stdout_lines, stderr_lines = await asyncio.gather(stdout_task, stderr_task)
    stdout = "\n".join(stdout_lines)

    if timed_out:
        logger.error(f"Process timed out after {timeout} seconds: {cmd[0]}")
        return ConversionResult(
            success=False,
            exit_code=ABNORMAL_EXIT_CODE,
            stdout=stdout,
            stderr="\n".join(stderr_lines + [f"Process timed out after {timeout} seconds."]),
        )

    exit_code = process.returncode
    return ConversionResult(
        success=exit_code == 0,
        exit_code=exit_code,
        stdout=stdout,
        stderr="\n".join(stderr_lines),
    )
