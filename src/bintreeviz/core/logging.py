"""Logging Configuration with pretty formatting for bintreeviz."""

import logging
from typing import Optional, Dict
from enum import Enum, IntEnum
from datetime import datetime
from pydantic import BaseModel, Field

# ANSI Color Codes
class Colors:
    """ANSI color codes for pretty terminal output."""
    INFO = '\033[94m'        # Blue
    SUCCESS = '\033[92m'     # Green
    WARNING = '\033[93m'     # Yellow
    ERROR = '\033[91m'       # Red
    RESET = '\033[0m'        # Reset
    BOLD = '\033[1m'         # Bold
    DIM = '\033[2m'          # Dim

# Pretty format strings
PRETTY_FORMAT = (
    "%(asctime)s │ %(levelname)-8s │ %(message)s"
)

DETAILED_FORMAT = (
    f"{Colors.DIM}%(asctime)s{Colors.RESET} │ "
    f"%(colored_level)-40s │ "
    f"%(message)s"
)

class PrettyFormatter(logging.Formatter):
    """Custom formatter with colors and symbols."""

    level_colors = {
        'DEBUG': (Colors.DIM, '🔍'),
        'VERBOSE': (Colors.DIM, '·'),
        'INFO': (Colors.INFO, 'ℹ️'),
        'STAGE': (Colors.SUCCESS, '🌳'),  # layout/render milestones
        'WARNING': (Colors.WARNING, '⚠️'),
        'ERROR': (Colors.ERROR, '❌'),
        'CRITICAL': (Colors.ERROR + Colors.BOLD, '🚨'),
    }

    def format(self, record):
        color, symbol = self.level_colors.get(record.levelname, (Colors.RESET, '•'))
        record.colored_level = f"{color}{symbol} {record.levelname}{Colors.RESET}"

        message = super().format(record)

        # Separator line for errors and warnings
        if record.levelno >= logging.WARNING:
            message = f"{message}\n{Colors.DIM}{'─' * 80}{Colors.RESET}"

        return message

class PrettyLogHandler(logging.StreamHandler):
    """Handler that adds pretty formatting to log records."""

    def emit(self, record):
        try:
            record.asctime = datetime.fromtimestamp(record.created).strftime('%H:%M:%S')
            msg = self.format(record)
            self.stream.write(msg + self.terminator)
            if record.levelno >= logging.WARNING:
                self.stream.write(self.terminator)
            self.flush()
        except Exception:
            self.handleError(record)

class LogComponent(str, Enum):
    """Components that can be logged.

    The value is the logger name used in the logging hierarchy.
    """
    BUILDER = "bintreeviz.core.builder"        # Tree traversal
    ENGINE = "bintreeviz.core.engine"          # Layout engine backends
    VISUALIZER = "bintreeviz.core.visualizer"  # visualize() sequencing

class LogLevel(IntEnum):
    """Log levels mapped to logging module levels."""
    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR
    CRITICAL = logging.CRITICAL
    STAGE = 25  # Custom level for layout/render milestones

class VerbosityLevel(IntEnum):
    """Custom verbosity levels for more granular control."""
    DEBUG = logging.DEBUG
    VERBOSE = 15  # Custom lower-than-INFO level
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR
    CRITICAL = logging.CRITICAL

# Register custom log levels
logging.addLevelName(LogLevel.STAGE, "STAGE")
logging.addLevelName(VerbosityLevel.VERBOSE, "VERBOSE")

class TreeVizLoggingConfig(BaseModel):
    """Configuration for logging behavior."""
    show_traversal: bool = Field(default=False)  # per-node DEBUG records

def configure_logging(
    default_level: LogLevel = LogLevel.INFO,
    component_levels: Optional[Dict[LogComponent, LogLevel]] = None,
    pretty: bool = True,
    log_file: Optional[str] = None
) -> None:
    """Configure logging with pretty formatting.

    The library never calls this itself; applications and the example
    scripts opt in.
    """
    handlers = []

    console_handler = PrettyLogHandler() if pretty else logging.StreamHandler()
    console_handler.setFormatter(
        PrettyFormatter(DETAILED_FORMAT if pretty else PRETTY_FORMAT)
    )
    handlers.append(console_handler)

    # File handler if specified (without colors)
    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(logging.Formatter(PRETTY_FORMAT))
        handlers.append(file_handler)

    root_logger = logging.getLogger()
    root_logger.setLevel(default_level.value)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    for handler in handlers:
        root_logger.addHandler(handler)

    if not component_levels:
        component_levels = {
            LogComponent.VISUALIZER: LogLevel.STAGE,  # Always show written files
            LogComponent.ENGINE: LogLevel.INFO,
            LogComponent.BUILDER: LogLevel.INFO,
        }

    for component, level in component_levels.items():
        logger = logging.getLogger(component.value)
        logger.setLevel(level.value)

def get_logger(component: LogComponent) -> logging.Logger:
    """Get a logger for a specific component."""
    logger = logging.getLogger(component.value)

    def log_stage(self, msg: str) -> None:
        self.log(LogLevel.STAGE, msg)

    logger.stage = lambda msg: log_stage(logger, msg)

    return logger

def log_verbose(logger: logging.Logger, message: str) -> None:
    """Log a message at VERBOSE level."""
    if logger.isEnabledFor(VerbosityLevel.VERBOSE):
        logger.log(VerbosityLevel.VERBOSE, message)
