"""Logging utilities."""

import logging


def setup_logging(log_level: int | str = logging.WARNING) -> logging.Logger:
    """Sets up root logging for the octo command-line tool.

    The library modules only create named loggers; handlers are attached here.

    Args:
        log_level (int | str): The logging level to use, as a number or a
            level name such as "INFO".

    Returns:
        logging.Logger: The root logger.
    """
    if isinstance(log_level, str):
        level_name = log_level
        log_level = logging.getLevelName(level_name.upper())
        if not isinstance(log_level, int):
            error_message = f"Unknown log level: {level_name}."
            raise ValueError(error_message)

    logger = logging.getLogger()
    logger.setLevel(log_level)

    formatter = logging.Formatter(
        "[%(levelname)s] %(asctime)s,%(msecs)03d: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    handler = logging.StreamHandler()
    handler.setLevel(log_level)
    handler.setFormatter(formatter)

    if not logger.handlers:
        logger.addHandler(handler)

    return logger
