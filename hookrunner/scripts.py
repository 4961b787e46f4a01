"""Building of jobs that run scripts from the source directories."""

from __future__ import annotations

import logging
import os
import shlex
import stat
from dataclasses import dataclass, field

from hookrunner.commands import Job
from hookrunner.errors import ScriptNotExistsError, SkipError

logger = logging.getLogger(__name__)

EXECUTABLE_FILE_MODE = 0o751
EXECUTABLE_MASK = 0o111


@dataclass
class ScriptParams:
    """Where to look for a script and how to call it."""

    hook_name: str
    script: str
    source_dirs: list[str] = field(default_factory=list)
    runner: str = ""
    git_args: list[str] = field(default_factory=list)


def build_script(params: ScriptParams) -> Job:
    """Build one command line for each source directory holding the script.

    Raises SkipError if a found script is not a regular file and
    ScriptNotExistsError if it exists in none of the directories.
    """
    found = False
    execs: list[str] = []
    for source_dir in params.source_dirs:
        script_path = os.path.join(source_dir, params.hook_name, params.script)
        try:
            info = os.stat(script_path)
        except FileNotFoundError:
            logger.debug("script doesn't exist: %s", script_path)
            continue
        except OSError:
            logger.error("Failed to get info about a script: %s", params.script)
            raise

        found = True

        if not stat.S_ISREG(info.st_mode):
            logger.debug("script '%s' is not a regular file, skipping", script_path)
            raise SkipError("not a regular file")

        if not info.st_mode & EXECUTABLE_MASK:
            try:
                os.chmod(script_path, EXECUTABLE_FILE_MODE)
            except OSError as err:
                logger.error("Couldn't change file mode to make file executable: %s", err)
                raise

        args = [params.runner] if params.runner else []
        args.append(shlex.quote(script_path))
        args.extend(params.git_args)
        execs.append(" ".join(args))

    if not found:
        raise ScriptNotExistsError(params.script)

    return Job(execs=execs, files=[])