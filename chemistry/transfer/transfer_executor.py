# chemistry/transfer/transfer_executor.py
from contextlib import ExitStack
from typing import Optional

from chemistry.config import (
    LOG_SOURCE_CHEMISTRY, MSG_CONTAINER_EMPTY, MSG_FILL, MSG_REAGENTS_CONSUMED, MSG_TRANSFER
)
from chemistry.items.reagent_container import ReagentContainer
from chemistry.items.reagent_mix import ReagentMix
from chemistry.transfer.direction_resolver import ONE, DirectionResolver, Outcome, TransferTo
from chemistry.transfer.transfer_result import TransferResult
from chemistry.utils.logger import Logger
from chemistry.utils.text_formatter import format_amount

class TransferExecutor:
    """Carries out one resolved transfer between two containers."""

    def __init__(self, resolver: Optional[DirectionResolver] = None, logger=None):
        self.logger = logger or Logger
        self.resolver = resolver or DirectionResolver(self.logger)

    def execute(self, one: ReagentContainer, two: Optional[ReagentContainer],
                outcome: Optional[Outcome] = None, reinstate_excess: bool = False) -> TransferResult:
        """
        Move reagents between `one` (held) and `two` (target).

        When `outcome` is omitted the direction is resolved from the two
        transfer modes while both containers are locked. With no `two` the held
        container's reagents are consumed. Failures are returned as results,
        never raised. Whatever the receiver refuses travels back in `excess`;
        with `reinstate_excess` it is put back into the source before the locks
        are released and the returned `excess` is empty.
        """
        if two is None:
            return self.move_reagents(one, one.transfer_amount, None)

        with _locked(one, two):
            if outcome is None:
                outcome = self.resolver.resolve(one.transfer_mode, two.transfer_mode, one.is_full)

            if not isinstance(outcome, TransferTo):
                return TransferResult(False, getattr(outcome, "reason", ""), 0.0)

            transfer_to = one if outcome.receiver == ONE else two
            transfer_from = two if transfer_to is one else one

            self.logger.trace(LOG_SOURCE_CHEMISTRY,
                              f"Attempting transfer from {transfer_from!r} into {transfer_to!r}")

            if transfer_from.is_empty:
                return TransferResult(False, MSG_CONTAINER_EMPTY.format(name=transfer_from.name), 0.0)

            use_fill_message = transfer_to.is_empty
            result = self.move_reagents(transfer_from, transfer_from.transfer_amount, transfer_to)

            if reinstate_excess and not result.excess.is_empty():
                transfer_from.reinstate(result.excess)
                result.excess = ReagentMix()

        if result.success and not result.message:
            amount = format_amount(result.transfer_amount)
            if use_fill_message:
                result.message = MSG_FILL.format(to_name=transfer_to.name, amount=amount,
                                                 from_name=transfer_from.name)
            else:
                result.message = MSG_TRANSFER.format(amount=amount, to_name=transfer_to.name)
        return result

    def move_reagents(self, source: ReagentContainer, amount: float,
                      receiver: Optional[ReagentContainer] = None) -> TransferResult:
        """
        Single-target form: move up to `amount` from `source` into `receiver`.
        With no receiver the reagents are consumed.
        """
        if receiver is None:
            consumed = source.take(amount)
            return TransferResult(True, MSG_REAGENTS_CONSUMED, consumed.total)

        with _locked(source, receiver):
            moved = source.take(amount)
            return receiver.add(moved)

def _locked(*containers: ReagentContainer) -> ExitStack:
    """Hold every container's lock, always acquired in the same order."""
    stack = ExitStack()
    for container in sorted(set(containers), key=id):
        stack.enter_context(container.lock)
    return stack
