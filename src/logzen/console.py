# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: logzen

import sys
from typing import TextIO


class Console:
    """Console-like endpoint writing one line per call.

    ``log``, ``info`` and ``debug`` go to stdout, ``warn`` and ``error`` to
    stderr. Unless given explicitly, streams are looked up on ``sys`` at call
    time so redirected streams are honoured.
    """

    def __init__(self, stdout: TextIO | None = None, stderr: TextIO | None = None):
        self._stdout = stdout
        self._stderr = stderr

    @property
    def stdout(self) -> TextIO:
        return self._stdout if self._stdout is not None else sys.stdout

    @property
    def stderr(self) -> TextIO:
        return self._stderr if self._stderr is not None else sys.stderr

    def _print(self, stream: TextIO, data: str) -> None:
        stream.write(f"{data}\n")
        stream.flush()

    def log(self, data: str) -> None:
        self._print(self.stdout, data)

    def info(self, data: str) -> None:
        self._print(self.stdout, data)

    def debug(self, data: str) -> None:
        self._print(self.stdout, data)

    def warn(self, data: str) -> None:
        self._print(self.stderr, data)

    def error(self, data: str) -> None:
        self._print(self.stderr, data)
