import logging
import sys

from colorlog import ColoredFormatter


def create_handler(log_format: str = "default") -> logging.Handler:
    handler = logging.StreamHandler(stream=sys.stdout)
    if log_format == "color":
        handler.setFormatter(
            ColoredFormatter(
                fmt="%(log_color)s%(levelname)s:%(name)s:%(reset)s%(message)s",
                log_colors={
                    "DEBUG": "cyan",
                    "INFO": "green",
                    "WARNING": "yellow",
                    "ERROR": "red",
                    "CRITICAL": "red",
                },
            )
        )
    elif log_format != "default":
        raise NotImplementedError(f"{log_format=}")
    return handler
