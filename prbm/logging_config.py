# prbm/logging_config.py
"""
Logging for the solvers, the Streamlit app and the API.

Every prbm module logs through `logging.getLogger(__name__)`, so all records
land under the "prbm" logger configured here. The kernel only emits DEBUG
lines (iteration counts and residuals); `trace_solvers` turns those on
without making the app and API chatty.
"""
import logging
import sys
from typing import Optional, Union

PACKAGE_LOGGER = "prbm"
KERNEL_LOGGER = "prbm.kernel"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def resolve_level(level: Union[int, str]) -> int:
    """
    Accept a numeric level or a name such as "debug" (e.g. from PRBM_LOG_LEVEL).

    Raises:
        ValueError: If the name is not a standard logging level
    """
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return resolved


def setup_logging(
    level: Union[int, str] = logging.INFO,
    log_file: Optional[str] = None,
    trace_solvers: bool = False,
) -> logging.Logger:
    """
    Configure the "prbm" logger and return it.

    Args:
        level: Level for the package (int or level name)
        log_file: Optional path; records are also written there (overwritten)
        trace_solvers: Log the kernel's per-solve iteration diagnostics at
            DEBUG regardless of `level`

    Returns:
        The configured package logger
    """
    level = resolve_level(level)
    handler_level = logging.DEBUG if trace_solvers else level

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    # Streamlit re-runs the script on every interaction
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt='%H:%M:%S')
    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))
    for handler in handlers:
        handler.setLevel(handler_level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    kernel_logger = logging.getLogger(KERNEL_LOGGER)
    kernel_logger.setLevel(logging.DEBUG if trace_solvers else logging.NOTSET)

    logger.info("Logging initialized (level=%s, trace_solvers=%s)",
                logging.getLevelName(level), trace_solvers)
    return logger
