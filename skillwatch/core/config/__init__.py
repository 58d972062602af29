"""
Skillwatch configuration.

Exports the static environment-driven configuration used by the logging
subsystem and any caller that needs to know the deployment environment.
"""

from skillwatch.core.config.config import Config, Environment

__all__ = ["Config", "Environment"]
