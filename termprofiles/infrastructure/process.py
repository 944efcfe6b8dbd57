"""Subprocess execution for short-lived enumeration commands."""

import asyncio
import logging
import subprocess
from collections.abc import Sequence

logger = logging.getLogger(__name__)


class AsyncSubprocessRunner:
    """Run a command with asyncio and capture stdout.

    No timeout is imposed; callers wrap run() in asyncio.wait_for
    if they need one.
    """

    async def run(self, args: Sequence[str]) -> bytes:
        """Run args and return raw stdout.

        Raises:
            OSError: If the executable cannot be launched.
            subprocess.CalledProcessError: On a non-zero exit code.
        """
        process = await asyncio.create_subprocess_exec(
            *args,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
        stdout, stderr = await process.communicate()
        if process.returncode != 0:
            logger.debug("%s exited with %s", args[0], process.returncode)
            raise subprocess.CalledProcessError(
                process.returncode, list(args), output=stdout, stderr=stderr
            )
        return stdout
