"""
Portal configuration
"""
from .settings import PortalConfig, TestingConfig, get_config

__all__ = ['PortalConfig', 'TestingConfig', 'get_config']
