"""
Configuration for StepMaster
"""

from stepmaster.config.settings import Settings, settings

__all__ = ["Settings", "settings"]
