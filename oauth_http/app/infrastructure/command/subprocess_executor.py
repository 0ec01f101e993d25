"""Concrete CommandExecutor: runs a command line through the shell and captures stdout."""
from __future__ import annotations

import subprocess

from loguru import logger

from oauth_http.app.constants import READ_CHUNK_SIZE
from oauth_http.app.core import SERVICE_NAME
from oauth_http.app.domain.buffer import GrowableBuffer
from oauth_http.app.ports.command_executor import CommandExecutor
from oauth_http.app.ports.http_transport import SubprocessError


class SubprocessExecutor(CommandExecutor):
    """Reads the child's stdout in fixed-size chunks until end-of-file.

    A command that runs but prints nothing yields b"". Failing to spawn the
    shell raises SubprocessError. The exit status is logged, not raised.
    """

    def __init__(self, chunk_size: int = READ_CHUNK_SIZE) -> None:
        if chunk_size <= 0:
            raise ValueError("chunk_size must be > 0")
        self._chunk_size = chunk_size

    def run(self, command: str) -> bytes:
        logger.bind(service_name=SERVICE_NAME, event="command_executing", command=command).debug("")
        try:
            process = subprocess.Popen(command, shell=True, stdout=subprocess.PIPE)
        except OSError as exc:
            logger.warning("cannot spawn command interpreter: {}", exc)
            raise SubprocessError(f"cannot spawn command interpreter: {exc}") from exc

        buffer = GrowableBuffer()
        try:
            while True:
                chunk = process.stdout.read(self._chunk_size)
                if not chunk:
                    break
                buffer.append(chunk)
        finally:
            process.stdout.close()
            returncode = process.wait()

        if returncode != 0:
            logger.warning("command exited with status {}", returncode)
        logger.bind(
            service_name=SERVICE_NAME,
            event="command_completed",
            size=len(buffer),
            returncode=returncode,
        ).info("")
        return buffer.getvalue()
