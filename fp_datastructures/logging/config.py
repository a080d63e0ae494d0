"""
Logging for fp_datastructures.

Every library logger is a structlog wrapper around a standard library
logger under the "fp_datastructures" namespace, which carries a
NullHandler. Until an application configures logging, the debug
events raised by the list operations go nowhere.
"""

import logging
import sys

import structlog

LIBRARY_LOGGER = "fp_datastructures"

logging.getLogger(LIBRARY_LOGGER).addHandler(logging.NullHandler())


def configure_logging(
    level: str = "INFO",
    format_json: bool = False,
    cache_logger_on_first_use: bool = True,
) -> None:
    """
    Send the library's events to stdout through structlog.

    Meant to be called once by an application (the library itself
    never calls it). Leave `cache_logger_on_first_use` off if
    structlog gets reconfigured afterwards, as tests do.
    """
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        stream=sys.stdout,
        format="%(message)s",
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            (
                structlog.processors.JSONRenderer()
                if format_json
                else structlog.dev.ConsoleRenderer(colors=False)
            ),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=cache_logger_on_first_use,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    # Wrapping the stdlib logger directly (rather than going through
    # the configured logger factory) keeps events off structlog's
    # default PrintLogger when nothing has been configured
    return structlog.wrap_logger(
        logging.getLogger(name),
        wrapper_class=structlog.stdlib.BoundLogger,
    )
