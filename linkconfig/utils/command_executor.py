import subprocess
from ..cli_logger import logger
from ..errors import ToolLaunchError

def run_shell_command(command, env=None):
    """
    Executes a command and captures its output.

    Args:
        command (list): The command to execute as a list of strings.
        env (dict, optional): A dictionary of environment variables.

    Returns:
        A tuple (stdout, stderr, return_code).

    Raises:
        ToolLaunchError: If the command could not be started at all.
    """
    logger.debug(f"Running: {' '.join(command)}")
    try:
        result = subprocess.run(
            command,
            capture_output=True,
            text=True,
            env=env,
            check=False,
        )
    except FileNotFoundError as e:
        logger.error(f"Command not found: {e.filename or command[0]}")
        raise ToolLaunchError(command[0], e) from e
    except OSError as e:
        logger.error(f"Could not start {command[0]}: {e}")
        raise ToolLaunchError(command[0], e) from e
    return result.stdout, result.stderr, result.returncode
