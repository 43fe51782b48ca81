# chemistry/commands/command_system.py
from typing import Any, Dict, List, Optional
from functools import wraps

from chemistry.config import FORMAT_ERROR, FORMAT_RESET

# Dictionary to store all registered commands
registered_commands: Dict[str, Dict[str, Any]] = {}

def command(name: str, aliases: Optional[List[str]] = None, category: str = "other",
           help_text: str = "No help available."):
    """
    Decorator for registering player commands.
    """
    aliases = aliases or []

    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            return func(*args, **kwargs)

        cmd_data = {
            "name": name,
            "aliases": aliases,
            "handler": wrapper,
            "help_text": help_text,
            "category": category
        }
        wrapper._command_info = cmd_data # type: ignore

        registered_commands[name] = cmd_data
        for alias in aliases:
            registered_commands[alias] = cmd_data

        return wrapper
    return decorator

def get_registered_commands() -> Dict[str, Dict[str, Any]]:
    """Get all registered commands."""
    return registered_commands

class CommandProcessor:
    """Processes user input and dispatches commands to appropriate handlers."""

    def process_input(self, text: str, context: Any = None) -> str:
        """
        Process user input and execute the corresponding command using a
        longest-match-first strategy for multi-word commands.
        """
        text = text.strip().lower()
        if not text: return ""
        parts = text.split()

        for i in range(len(parts), 0, -1):
            potential_cmd = " ".join(parts[:i])
            if potential_cmd in registered_commands:
                cmd_data = registered_commands[potential_cmd]
                args = parts[i:] # The rest of the input becomes the arguments

                if context and isinstance(context, dict):
                     context['executed_command_name'] = cmd_data.get('name', potential_cmd)

                return cmd_data["handler"](args, context)

        return f"{FORMAT_ERROR}Unknown command: {parts[0]}{FORMAT_RESET}"

    def get_command_help(self, command_name: str) -> str:
        """Get the help text for a single command or alias."""
        cmd_data = registered_commands.get(command_name.lower())
        if not cmd_data:
            return f"{FORMAT_ERROR}No help for '{command_name}'.{FORMAT_RESET}"
        return cmd_data["help_text"]
