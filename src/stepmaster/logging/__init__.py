"""
Structured logging setup for StepMaster
"""

from stepmaster.logging.setup import setup_logging

__all__ = ["setup_logging"]
