"""
pytunnel Utilities - compression and logging helpers
"""

from .compression import compress_data, compress_if_beneficial, decompress_data, is_compressed
from .logging_config import ModuleLogger, configure_logging, set_log_level

__all__ = [
    'compress_data',
    'compress_if_beneficial',
    'decompress_data',
    'is_compressed',
    'ModuleLogger',
    'configure_logging',
    'set_log_level',
]
