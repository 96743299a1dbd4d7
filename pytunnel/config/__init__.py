"""
Configuration system for pytunnel
"""

from .tunnel_config import TunnelConfig
from .validation import ConfigValidationError

__all__ = ['TunnelConfig', 'ConfigValidationError']
