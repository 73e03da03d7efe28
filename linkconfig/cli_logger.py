import datetime
import sys
import traceback
import os
from colorama import Fore, Style, init

# Initialize Colorama
init(autoreset=True)

LOG_DIR = os.environ.get(
    "LINKCONFIG_LOG_DIR",
    os.path.join(os.path.expanduser("~"), ".linkconfig", "logs"),
)
os.makedirs(LOG_DIR, exist_ok=True)

class Logger:
    """Coloured console output mirrored into a per-run log file.

    Debug messages always reach the log file but only reach the console
    when ``verbose`` is set. With ``quiet_stdout`` every console message
    goes to stderr, leaving stdout to command output.
    """

    def __init__(self, verbose=False, quiet_stdout=False):
        self.verbose = verbose
        self.quiet_stdout = quiet_stdout
        self.log_file = os.path.join(
            LOG_DIR,
            f"linkconfig_{datetime.datetime.now().strftime('%Y%m%d_%H%M%S')}.log"
        )

    def _write(self, level, message):
        with open(self.log_file, "a") as f:
            f.write(f"[{datetime.datetime.now().strftime('%H:%M:%S')}] [{level}] {message}\n")

    def _log(self, level, message, color, stream=None, prefix="", show_timestamp=True, console=True):
        self._write(level, message)
        if not console:
            return
        # looked up per call so redirected streams are honoured
        if stream is None:
            stream = sys.stderr if self.quiet_stdout else sys.stdout
        if show_timestamp:
            timestamp = datetime.datetime.now().strftime("%H:%M:%S")
            print(f"{color}{Style.BRIGHT}[{timestamp}]{Style.RESET_ALL} {prefix}{message}{Style.RESET_ALL}", file=stream)
        else:
            print(f"{color}{prefix}{message}{Style.RESET_ALL}", file=stream)

    def info(self, message):
        self._log("INFO", message, Fore.CYAN)

    def step_info(self, message, indent=0):
        self._log("INFO", message, Fore.CYAN, prefix=" " * indent, show_timestamp=False)

    def success(self, message):
        self._log("SUCCESS", message, Fore.GREEN, prefix=f"{Style.BRIGHT}✓ {Style.RESET_ALL}{Fore.GREEN}")

    def warning(self, message):
        self._log("WARNING", message, Fore.YELLOW, stream=sys.stderr,
                  prefix=f"{Style.BRIGHT}⚠ {Style.RESET_ALL}{Fore.YELLOW}")

    def error(self, message):
        self._log("ERROR", message, Fore.RED, stream=sys.stderr,
                  prefix=f"{Style.BRIGHT}✖ {Style.RESET_ALL}{Fore.RED}")

    def debug(self, message):
        self._log("DEBUG", message, Fore.WHITE + Style.DIM, console=self.verbose)

    def exception(self, exc_type, exc_value, exc_traceback):
        self.error(f"An unhandled exception occurred: {exc_value}")
        for line in traceback.format_exception(exc_type, exc_value, exc_traceback):
            for sub_line in line.splitlines():
                if sub_line.strip():
                    self._log("TRACEBACK", f">> {sub_line}", Fore.RED, stream=sys.stderr)


logger = Logger()

def get_latest_log_file():
    """Return the path to the latest log file."""
    log_files = [os.path.join(LOG_DIR, f) for f in os.listdir(LOG_DIR) if f.endswith(".log")]
    if not log_files:
        return None
    return max(log_files, key=os.path.getctime)
