"""Port: run an assembled shell command and collect its standard output."""
from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class CommandExecutor(Protocol):
    def run(self, command: str) -> bytes:
        """Run command through the shell; raise SubprocessError if it cannot be spawned."""
        ...
