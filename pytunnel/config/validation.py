"""
Configuration validation utilities
"""

import logging

from ..codec import lookup


class ConfigValidationError(Exception):
    """Raised when configuration validation fails"""
    pass


# Chat prefix plus continuation flag plus at least one symbol
MIN_MESSAGE_LENGTH = 4


def validate_prefix(prefix: str) -> str:
    """Validate the chat marker that tags tunnel messages"""
    if not prefix or not isinstance(prefix, str):
        raise ConfigValidationError("Prefix must be a non-empty string")

    if prefix != prefix.strip():
        raise ConfigValidationError("Prefix cannot start or end with whitespace")

    for char in prefix:
        if lookup(char) is not None:
            raise ConfigValidationError(f"Prefix character {char!r} collides with the codec alphabet")

    return prefix


def validate_message_length(length: int, prefix: str = "") -> int:
    """Validate maximum chat message length (in code points)"""
    if not isinstance(length, int) or isinstance(length, bool):
        raise ConfigValidationError("Message length must be an integer")

    minimum = max(MIN_MESSAGE_LENGTH, len(prefix) + 2)
    if length < minimum:
        raise ConfigValidationError(f"Message length must be at least {minimum}")

    return length


def validate_ratio(ratio: float) -> float:
    """Validate compression ratio threshold"""
    if not isinstance(ratio, (int, float)) or isinstance(ratio, bool):
        raise ConfigValidationError("Ratio must be a number")

    if ratio <= 0 or ratio > 1:
        raise ConfigValidationError("Ratio must be in (0, 1]")

    return float(ratio)


def validate_size(size: int) -> int:
    """Validate a byte size limit"""
    if not isinstance(size, int) or isinstance(size, bool):
        raise ConfigValidationError("Size must be an integer")

    if size <= 0:
        raise ConfigValidationError("Size must be greater than 0")

    return size


def validate_log_level(level: str) -> str:
    """Validate a logging level name"""
    if not isinstance(level, str):
        raise ConfigValidationError("Log level must be a string")

    name = level.upper()
    if not isinstance(logging.getLevelName(name), int):
        raise ConfigValidationError(f"Unknown log level: {level}")

    return name
