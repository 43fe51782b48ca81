# chemistry/commands/__init__.py
"""
Commands package initializer.
Importing the handler modules registers them with the command system.
"""
from .command_system import CommandProcessor, command, get_registered_commands
from . import interaction
