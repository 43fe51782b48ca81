import argparse

from chemistry.commands import CommandProcessor
from chemistry.game_object import GameObject, SpillRecipient
from chemistry.items.reagent_container import ContainerConfig, ReagentContainer
from chemistry.items.reagent_mix import ReagentMix
from chemistry.transfer.access_gate import NetworkSide
from chemistry.transfer.transfer_mode import TransferMode
from chemistry.utils.logger import Logger, LogLevel
from chemistry.utils.text_formatter import strip_formatting
from chemistry.world import World

LOG_LEVELS = {
    "trace": LogLevel.TRACE, "debug": LogLevel.DEBUG, "info": LogLevel.INFO,
    "warning": LogLevel.WARNING, "error": LogLevel.ERROR
}

def main():
    parser = argparse.ArgumentParser(description='Reagent transfer workbench')
    parser.add_argument('--log-level', '-l', choices=sorted(LOG_LEVELS), default='warning',
                        help='Minimum diagnostics level (default: warning)')
    parser.add_argument('--client', action='store_true',
                        help='Evaluate interactions without authority (skips trait whitelists)')
    args = parser.parse_args()

    Logger.set_level(LOG_LEVELS[args.log_level])
    context = {
        "world": create_workbench(),
        "side": NetworkSide.CLIENT if args.client else NetworkSide.SERVER
    }
    processor = CommandProcessor()

    print("Commands: pour <a> into <b>, splash <a> on <b>, setamount <a>, quit")
    while True:
        try:
            text = input("> ")
        except EOFError:
            break
        if text.strip().lower() in ("quit", "exit"):
            break
        output = processor.process_input(text, context)
        if output:
            print(strip_formatting(output))

def create_workbench() -> World:
    world = World()
    world.add_object(GameObject("beaker", "Beaker", container=ReagentContainer(
        ContainerConfig(capacity=50, possible_transfer_amounts=(5, 10, 15, 20, 25, 30, 50)),
        ReagentMix({"water": 40}))))
    world.add_object(GameObject("flask", "Flask", container=ReagentContainer(
        ContainerConfig(capacity=100))))
    world.add_object(GameObject("syringe", "Syringe", container=ReagentContainer(
        ContainerConfig(capacity=15, transfer_mode=TransferMode.SYRINGE, transfer_amount=5,
                        possible_transfer_amounts=(5, 10, 15)))))
    world.add_object(GameObject("dispenser", "Water Dispenser", container=ReagentContainer(
        ContainerConfig(capacity=100, transfer_mode=TransferMode.OUTPUT_ONLY, transfer_amount=25),
        ReagentMix({"water": 100}))))
    world.add_object(GameObject("drain", "Drain", container=ReagentContainer(
        ContainerConfig(capacity=100, transfer_mode=TransferMode.INPUT_ONLY))))
    world.add_object(GameObject("bob", "Bob", recipient=SpillRecipient((0, 0))))
    return world

if __name__ == "__main__":
    main()
