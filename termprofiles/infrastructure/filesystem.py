"""Real filesystem stat provider."""

import asyncio
import os
import stat
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class FileStat:
    """File type bits from an os.stat_result."""

    mode: int

    def is_file(self) -> bool:
        return stat.S_ISREG(self.mode)

    def is_symbolic_link(self) -> bool:
        return stat.S_ISLNK(self.mode)


class OSStatProvider:
    """Stat provider backed by os.stat/os.lstat, run off the event loop."""

    async def stat(self, path: str) -> FileStat:
        result = await asyncio.to_thread(os.stat, path)
        return FileStat(result.st_mode)

    async def lstat(self, path: str) -> FileStat:
        result = await asyncio.to_thread(os.lstat, path)
        return FileStat(result.st_mode)
