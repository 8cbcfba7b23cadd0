"""
Structured logger used by every stage of the SDK setup pipeline
"""

import inspect
import json
import logging

from pydantic import BaseModel


class LogLine(BaseModel):
    """
    Represents a line in the flexsdk_setup log
    """

    caller_file: str
    caller_name: str
    caller_line: int
    level: str
    message: str


class SetupLogger:
    """
    Logger class
    """

    def __init__(self, name: str = "flexsdk_setup") -> None:
        self.logger = logging.getLogger(name)
        self.logger.setLevel(logging.INFO)

    def log(self, debug_message: str, level: int) -> None:
        """
        Log the debug message together with the location it was emitted from
        """
        debug_message = debug_message.replace("\n", " ")

        curframe = inspect.currentframe()
        calframe = inspect.getouterframes(curframe, 2)

        caller_file = calframe[1][1].replace("\\", "/").split("/")[-1]
        caller_line = calframe[1][2]
        caller_name = calframe[1][3]

        debug_log_line = LogLine(
            caller_file=caller_file,
            caller_name=caller_name,
            caller_line=caller_line,
            level=logging.getLevelName(level),
            message=debug_message,
        )

        self.logger.log(
            level=level,
            msg=json.dumps(debug_log_line.model_dump()),
        )

    def set_level(self, level: int) -> None:
        self.logger.setLevel(level)
