"""
StepMaster - step counting, activity classification and progress analytics
"""

__version__ = "0.1.0"

from stepmaster.config import Settings, settings
from stepmaster.logging import setup_logging

__all__ = ["Settings", "settings", "setup_logging"]
