"""
Configuration actions: units of privileged work run behind the gate.
"""

from privgate.actions.base import ConfigurationAction
from privgate.actions.fixed_value import FixedValueAction
from privgate.actions.script import ScriptAction

__all__ = ["ConfigurationAction", "FixedValueAction", "ScriptAction"]
