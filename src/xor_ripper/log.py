import logging
import sys

import structlog

PACKAGE_LOGGER = "xor_ripper"


def get_logger(name: str = PACKAGE_LOGGER):
    """
    structlog logger backed by a stdlib logger, for use inside the library.

    Until the application configures logging, debug and info events stop at the
    stdlib level check and nothing is written.
    """
    return structlog.wrap_logger(logging.getLogger(name))


def configure_logging(level: str = "WARNING", *, json: bool = False) -> None:
    """
    Configure structlog and the package's stdlib logger for the whole process.

    The library never calls this itself; applications opt in. With json=True the
    events are rendered as indented JSON, otherwise with the console renderer.
    Rendered events go to stdout.
    """
    level_no = logging.getLevelName(level.upper())
    if not isinstance(level_no, int):
        raise ValueError(f"Unknown log level: {level}")

    renderer = (
        structlog.processors.JSONRenderer(indent=2)
        if json
        else structlog.dev.ConsoleRenderer(colors=False)
    )
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level_no),
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter("%(message)s"))

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for old in list(package_logger.handlers):
        package_logger.removeHandler(old)
    package_logger.addHandler(handler)
    package_logger.setLevel(level_no)
    package_logger.propagate = False
