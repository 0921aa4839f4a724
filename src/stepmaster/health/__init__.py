"""
Health endpoints for StepMaster
"""

from stepmaster.health.checks import CheckResult, Readiness, check_readiness
from stepmaster.health.router import create_health_router

__all__ = ["CheckResult", "Readiness", "check_readiness", "create_health_router"]
