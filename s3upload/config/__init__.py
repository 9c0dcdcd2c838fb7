"""
Configuration: runtime settings from the environment and action inputs.

Supports a local profile for running outside a workflow.
"""

from .inputs import ActionInputs, ConfigurationError, load_action_inputs
from .settings import Settings, get_settings

__all__ = [
    "ActionInputs",
    "ConfigurationError",
    "Settings",
    "get_settings",
    "load_action_inputs",
]
