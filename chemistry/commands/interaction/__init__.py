# chemistry/commands/interaction/__init__.py
"""
Interaction commands package.
Exports handlers to be discovered by the command system.
"""
from .reagents import pour_handler, splash_handler, setamount_handler
