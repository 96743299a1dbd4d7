"""
Tunnel Configuration - settings for carrying payloads over chat
"""

import logging
from dataclasses import asdict, dataclass, fields
from typing import Any, Dict

from .validation import (
    validate_log_level,
    validate_message_length,
    validate_prefix,
    validate_ratio,
    validate_size,
)


@dataclass
class TunnelConfig:
    """Tunnel configuration settings"""

    # Framing
    prefix: str = "%%"
    max_message_length: int = 150

    # Compression
    compress: bool = True
    compress_min_ratio: float = 0.9

    # Limits
    max_payload_size: int = 1024 * 1024

    # Logging
    log_level: str = "INFO"
    debug: bool = False

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'TunnelConfig':
        """Create from dictionary, ignoring unknown keys"""
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})

    def update(self, **kwargs):
        """Update configuration values"""
        for key, value in kwargs.items():
            if hasattr(self, key):
                setattr(self, key, value)

    @property
    def level(self) -> int:
        """Numeric logging level; debug=True forces DEBUG"""
        if self.debug:
            return logging.DEBUG
        return logging.getLevelName(self.log_level.upper())

    def validate(self) -> 'TunnelConfig':
        """Check every field, raising ConfigValidationError on the first bad one"""
        self.prefix = validate_prefix(self.prefix)
        self.max_message_length = validate_message_length(self.max_message_length, self.prefix)
        self.compress_min_ratio = validate_ratio(self.compress_min_ratio)
        self.max_payload_size = validate_size(self.max_payload_size)
        self.log_level = validate_log_level(self.log_level)
        return self
