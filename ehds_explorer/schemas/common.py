from enum import Enum


class ProcessingStatus(str, Enum):
    SUCCESS = "success"
    ERROR = "error"
