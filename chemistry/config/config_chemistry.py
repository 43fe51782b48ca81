# chemistry/config/config_chemistry.py
"""
Configuration for reagent containers and the transfer engine.
"""

# --- Logging ---
LOG_SOURCE_CHEMISTRY = "Chemistry"

# --- Container Defaults ---
CONTAINER_DEFAULT_CAPACITY = 100.0
REAGENT_EPSILON = 0.001  # Volumes at or below this count as empty

# --- Transfer Amounts ---
TRANSFER_AMOUNT_MIN = 1.0
TRANSFER_AMOUNT_MAX = 100.0
TRANSFER_AMOUNT_DEFAULT = 20.0
TRANSFER_AMOUNT_DECIMALS = 2  # Rounding used when showing amounts to the player

# --- Direction Resolution ---
BLOCKED_BOTH_OUTPUT_ONLY = "both output-only"
BLOCKED_BOTH_INPUT_ONLY = "both input-only"
BLOCKED_MESSAGES = {
    BLOCKED_BOTH_OUTPUT_ONLY: "Both containers are output-only.",
    BLOCKED_BOTH_INPUT_ONLY: "Both containers are input-only.",
}

# --- Transfer Messages ---
MSG_REAGENTS_CONSUMED = "Reagents were consumed"
MSG_CONTAINER_EMPTY = "The {name} is empty!"
MSG_CONTAINER_FULL = "The {name} is full."
MSG_REAGENTS_REJECTED = "The {name} can't hold those reagents."
MSG_FILL = "You fill the {to_name} with {amount} units of the contents of the {from_name}."
MSG_TRANSFER = "You transfer {amount} units of the solution to the {to_name}."
MSG_TRANSFER_AMOUNT_CHANGED = "The {name}'s transfer amount is now {amount} units."
MSG_SPILL = "You splash the contents of the {name} onto {target_name}."

# --- Commands ---
TRANSFER_COMMAND_PREPOSITION = "into"
SPILL_COMMAND_PREPOSITION = "on"
