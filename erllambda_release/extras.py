import logging
import subprocess
from typing import List, Tuple


def shell(args: List[str]) -> Tuple[int, str]:
    """Runs command and waits for it to exit.

    Standard error is merged into standard output, which is drained line by
    line so the child never blocks on a full pipe.

    Args:
        args (List[str]): Executable path followed by its arguments.

    Raises:
        OSError: Raised when command cannot be spawned.

    Returns:
        Tuple[int, str]: Exit status and combined output.
    """

    logging.debug("+ Shell: %s", " ".join(args))

    lines = []
    with subprocess.Popen(
        args,
        stdout=subprocess.PIPE,
        stderr=subprocess.STDOUT,
    ) as p:
        for raw in p.stdout:
            line = raw.decode("utf-8", errors="replace").rstrip("\n")
            logging.debug("  %s", line)
            lines.append(line)
        code = p.wait()

    return code, "\n".join(lines)
