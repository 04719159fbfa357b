import datetime
import enum
import logging
import sys

# Define the custom log levels
CRITICAL = logging.CRITICAL
FATAL = CRITICAL
ERROR = logging.ERROR
RESULT = 35
WARNING = logging.WARNING   # 30
WARN = WARNING
STATUS = 25
INFO = logging.INFO         # 20
VERBOSE = 19
DEBUG = logging.DEBUG       # 10
NOTSET = logging.NOTSET

DEFAULT_STREAM_LOG_LEVEL = logging.WARNING

custom_levels = {
    'RESULT': RESULT,
    'STATUS': STATUS,
    'VERBOSE': VERBOSE,
}


# ANSI colors shared by the log formatters and the findings ledger
class COLORS(enum.Enum):
    red = "\033[31m"
    green = "\033[32m"
    yellow = "\033[33m"
    blue = "\033[34m"
    cyan = "\033[36m"
    bold = "\033[1m"
    dim = "\033[2m"
    bred = "\033[1;31m"
    bblue = "\033[1;34m"
    normal = "\033[0m"


level_to_color_map = {
    ERROR: COLORS.bred,
    CRITICAL: COLORS.bred,
    WARNING: COLORS.yellow,
    RESULT: COLORS.green,
    STATUS: COLORS.bblue,
    INFO: COLORS.normal,
    VERBOSE: COLORS.normal,
    DEBUG: COLORS.dim,
}


def get_level_color(level):
    return level_to_color_map.get(level, COLORS.normal).value


def log_level_factory(level_name):
    level_num = custom_levels.get(level_name, logging.NOTSET)

    def log_func(self, message, *args, **kwargs):
        if self.isEnabledFor(level_num):
            # Report the caller of logger.status(), not this wrapper
            kwargs.setdefault('stacklevel', 2)
            self._log(level_num, message, args, **kwargs)
    return log_func


class HVLogger(logging.Logger):
    """Logger with the extra RESULT, STATUS and VERBOSE levels as methods."""


# Add the custom levels to the logger
for custom_name, custom_num in custom_levels.items():
    logging.addLevelName(custom_num, custom_name)
    setattr(HVLogger, custom_name.lower(), log_level_factory(custom_name))


class ColoredStandardFormatter(logging.Formatter):
    def __init__(self, use_colors=True):
        super().__init__()
        self.use_colors = use_colors

    def _wrap(self, record, text):
        if not self.use_colors:
            return text
        return f"{get_level_color(record.levelno)}{text}{COLORS.normal.value}"

    def format(self, record):
        formatted_time = f"{datetime.datetime.now().strftime('%Y-%m-%d %H:%M:%S')}"
        return self._wrap(record, f"{formatted_time}|{record.levelname}: {record.getMessage()}")


class ColoredDebugFormatter(ColoredStandardFormatter):
    def format(self, record):
        formatted_time = f"{datetime.datetime.now().strftime('%Y-%m-%d %H:%M:%S')}"
        return self._wrap(
            record,
            f"{formatted_time}|{record.levelname}:{record.module}:{record.lineno}: {record.getMessage()}"
        )


def setup_logging(name=__name__, stream_log_level=DEFAULT_STREAM_LOG_LEVEL, use_colors=None):
    """
    Create the project logger writing to stderr.

    stdout carries the findings transcript, so diagnostics stay on stderr.
    Colors are enabled only when stderr is a terminal unless use_colors is
    given explicitly. At DEBUG the formatter also shows module and line.
    """
    if isinstance(stream_log_level, str):
        stream_log_level = logging.getLevelName(stream_log_level.upper())
    if use_colors is None:
        use_colors = sys.stderr.isatty()

    _logger = HVLogger(name)
    _logger.setLevel(logging.DEBUG)

    stream_handler = logging.StreamHandler(sys.stderr)
    if stream_log_level <= DEBUG:
        stream_handler.setFormatter(ColoredDebugFormatter(use_colors=use_colors))
    else:
        stream_handler.setFormatter(ColoredStandardFormatter(use_colors=use_colors))
    stream_handler.setLevel(stream_log_level)
    _logger.addHandler(stream_handler)

    return _logger
