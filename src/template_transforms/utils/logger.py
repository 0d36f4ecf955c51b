"""Global logging and error handling utilities"""
import logging
import sys
import traceback

# Detect debug mode - True if running from source, False if packaged
DEBUG_MODE = not getattr(sys, 'frozen', False)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

_logger = logging.getLogger('template_transforms')


def configure_logging(verbose: bool = False):
    """Configure console logging for a host application or script

    Args:
        verbose: DEBUG level when True, otherwise only warnings and errors
    """
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )


def set_debug_mode(enabled: bool):
    """Override debug mode (tests and embedding hosts)"""
    global DEBUG_MODE
    DEBUG_MODE = enabled


def loggerRaise(e: Exception, user_message: str = None):
    """Handle exceptions with extra logging in release mode

    Args:
        e: The exception to handle
        user_message: User-friendly message to log alongside (optional)

    In DEBUG_MODE:
        - Just raises the exception (shows full traceback)

    In RELEASE_MODE:
        - Logs the user message (or exception string) and full traceback
        - Then raises the exception
    """
    if DEBUG_MODE:
        raise e

    message = user_message if user_message else str(e)
    tb = ''.join(traceback.format_exception(type(e), e, e.__traceback__))
    _logger.error(f"{message}\n{tb}")

    # Re-raise so the caller can handle it appropriately
    raise e
