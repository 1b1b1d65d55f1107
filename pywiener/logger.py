import logging

DEFAULT_LOG_LEVEL = logging.INFO

logger = logging.getLogger(__package__)

# Rewrite the textual representation of logging levels to make them a bit less scary
logging.addLevelName(logging.DEBUG, 'Debug')
logging.addLevelName(logging.INFO, 'Info')
logging.addLevelName(logging.WARNING, 'Warning')
logging.addLevelName(logging.ERROR, 'Error')
logging.addLevelName(logging.CRITICAL, 'Critical')
# Messages look like "Loglevel: <message here...>".  Only one handler,
# even if the module is reloaded.
if not logger.handlers:
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
    logger.addHandler(console_handler)

def set_log_level(level):
    """Sets the log level throughout pywiener.

    `level` must be an int as allowed by the Python logging module, or
    the name of a level in any case, e.g. "debug" or "WARNING".  See
    https://docs.python.org/3/library/logging.html for more.
    """
    if isinstance(level, str):
        level = level.upper()
    logger.setLevel(level)

def format_parameters(b, a, v, **kwargs):
    """Model parameters as a string for log messages, e.g. "b=0.5, a=2, v=1"."""
    params = [("b", b), ("a", a), ("v", v)] + sorted(kwargs.items())
    return ", ".join("%s=%g" % (k, val) for k,val in params)

# Set default log-level
set_log_level(DEFAULT_LOG_LEVEL)
