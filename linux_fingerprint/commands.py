import logging
import subprocess
from typing import Callable, Sequence

from linux_fingerprint.config import settings

logger = logging.getLogger(__name__)

# (argv, timeout seconds) -> trimmed stdout, "" on failure
CommandRunner = Callable[[Sequence[str], float], str]

def run_command(args: Sequence[str], timeout: float = settings.PROBE_TIMEOUT_SECONDS) -> str:
    """
    Run an external command and return its trimmed stdout.

    A missing binary, a non-zero exit status or an elapsed timeout all
    produce an empty string; the caller moves on to its next source.
    """
    argv = list(args)
    try:
        result = subprocess.run(
            argv,
            stdout=subprocess.PIPE,
            stderr=subprocess.DEVNULL,
            timeout=timeout,
            check=True,
        )
    except FileNotFoundError:
        logger.debug("Command not available: %s", argv[0])
        return ""
    except subprocess.TimeoutExpired:
        logger.debug("Command timed out after %ss: %s", timeout, argv)
        return ""
    except subprocess.CalledProcessError as e:
        logger.debug("Command failed with status %s: %s", e.returncode, argv)
        return ""
    except OSError as e:
        logger.debug("Could not run %s: %s", argv[0], e)
        return ""

    return result.stdout.decode("utf-8", errors="replace").strip()
