"""
Logging configuration for pytunnel with clear module prefixes
"""

import logging


class ModuleLogger:
    """Custom logger that adds module-specific prefixes"""

    # Module prefix mapping
    MODULE_PREFIXES = {
        'pytunnel.codec': '[CODEC]',
        'pytunnel.tunnel': '[TUNNEL]',
        'pytunnel.utils.compression': '[ZLIB]',
        'pytunnel.cli': '[CLI]',
    }

    @classmethod
    def prefix_for(cls, name: str) -> str:
        for module_name, module_prefix in cls.MODULE_PREFIXES.items():
            if name.startswith(module_name):
                return module_prefix
        return '[TUNNEL]'

    @classmethod
    def get_logger(cls, name: str) -> logging.Logger:
        """Get a logger with appropriate prefix for the module"""
        logger = logging.getLogger(name)

        # Don't add handler if already configured
        if logger.handlers:
            return logger

        handler = logging.StreamHandler()
        handler.setFormatter(ModulePrefixFormatter(cls.prefix_for(name)))

        logger.addHandler(handler)
        logger.propagate = False  # Don't propagate to root logger

        return logger


class ModulePrefixFormatter(logging.Formatter):
    """Custom formatter that adds module prefix to log messages"""

    def __init__(self, prefix: str):
        self.prefix = prefix
        super().__init__(
            fmt='%(asctime)s - %(prefix)s %(levelname)s - %(message)s',
            datefmt='%H:%M:%S'
        )

    def format(self, record):
        record.prefix = self.prefix
        return super().format(record)


def set_log_level(level: int):
    """Set one level on the package logger and every prefixed module logger"""
    logging.getLogger("pytunnel").setLevel(level)
    for module_name in ModuleLogger.MODULE_PREFIXES:
        logging.getLogger(module_name).setLevel(level)


def configure_logging(level: int = logging.INFO):
    """Configure logging for every pytunnel module"""
    for module_name in ModuleLogger.MODULE_PREFIXES:
        ModuleLogger.get_logger(module_name).setLevel(level)
