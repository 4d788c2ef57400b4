"""Environment detection: guess the hosting context (psgi, cgi, fastcgi)."""

from __future__ import annotations

import os
from collections.abc import Mapping
from enum import Enum

HOST_ENV_VAR = "PLACK_ENV"
CGI_ENV_VARS = ("PATH_INFO", "GATEWAY_INTERFACE")
WINDOWS_ENV_VAR = "WINDIR"
USER_ENV_VAR = "USER"


class EnvironmentGuess(str, Enum):
    PSGI = "psgi"
    CGI = "cgi"
    FASTCGI = "fastcgi"


def detect(guess: str | None = None, environ: Mapping[str, str] | None = None) -> str | None:
    """Best-effort guess of the execution context.

    Priority: host environment, then CGI variables, then the caller's
    explicit *guess*, then the FastCGI heuristic (neither ``WINDIR`` nor
    ``USER`` set). Returns ``None`` when nothing matches. The environment is
    read on every call.
    """
    env = os.environ if environ is None else environ

    if env.get(HOST_ENV_VAR):
        return EnvironmentGuess.PSGI.value

    if any(var in env for var in CGI_ENV_VARS):
        return EnvironmentGuess.CGI.value

    if guess:
        return guess

    if WINDOWS_ENV_VAR not in env and USER_ENV_VAR not in env:
        return EnvironmentGuess.FASTCGI.value

    return None
