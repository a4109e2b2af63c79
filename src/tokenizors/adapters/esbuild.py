"""esbuild-backed JavaScript minification and TypeScript/TSX transpilation."""

from __future__ import annotations

import asyncio
import contextlib
import logging
import shutil

from tokenizors.core.errors import AdapterInputError, AdapterSystemError

logger = logging.getLogger(__name__)

_STDIN_MARKER = "<stdin>:"


class EsbuildTranspiler:
    """Runs the ``esbuild`` executable with the source on stdin.

    Implements the ``TranspilerPort`` protocol. A non-zero exit whose
    diagnostics point into ``<stdin>`` is a problem with the submitted code;
    anything else (missing executable, bad flags, crashes) is a system error.
    """

    def __init__(self, executable: str = "esbuild", target: str = "es2020") -> None:
        self._executable = executable
        self._target = target

    def available(self) -> bool:
        return shutil.which(self._executable) is not None

    async def minify_javascript(self, code: str) -> str:
        # IIFE format lets esbuild mangle and shake top-level names too.
        return await self._run(
            [
                "--loader=js",
                "--minify",
                "--drop:console",
                "--format=iife",
                "--tree-shaking=false",
                f"--target={self._target}",
            ],
            code,
        )

    async def transpile_tsx(self, code: str) -> str:
        return await self._run(
            [
                "--loader=tsx",
                "--minify",
                "--jsx=automatic",
                f"--target={self._target}",
            ],
            code,
        )

    async def _run(self, args: list[str], code: str) -> str:
        try:
            proc = await asyncio.create_subprocess_exec(
                self._executable,
                *args,
                "--log-level=warning",
                "--color=false",
                stdin=asyncio.subprocess.PIPE,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except FileNotFoundError as exc:
            raise AdapterSystemError(f"esbuild executable '{self._executable}' not found.", str(exc)) from exc
        except OSError as exc:
            raise AdapterSystemError("Could not start esbuild.", str(exc)) from exc

        try:
            stdout, stderr = await proc.communicate(code.encode("utf-8"))
        finally:
            # Cancelled while esbuild was still running.
            if proc.returncode is None:
                with contextlib.suppress(ProcessLookupError):
                    proc.kill()

        diagnostics = stderr.decode("utf-8", errors="replace").strip()

        if proc.returncode != 0:
            if _STDIN_MARKER in diagnostics:
                raise AdapterInputError("Source could not be parsed.", diagnostics)
            raise AdapterSystemError(f"esbuild exited with status {proc.returncode}.", diagnostics or None)

        if diagnostics:
            logger.warning("esbuild warnings:\n%s", diagnostics)
        return stdout.decode("utf-8").rstrip("\n")
