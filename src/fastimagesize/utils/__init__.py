"""fastimagesize utility functions."""
from fastimagesize.utils.logging import get_logger, set_log_level
from fastimagesize.utils.parallel import process_batch

__all__ = [
    "get_logger",
    "process_batch",
    "set_log_level",
]
