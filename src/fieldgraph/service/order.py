"""
Order process states.

The default order process can be extended from config with custom states:

    order_process:
      ValidatingCustomer:
        to: [ArrangingPayment]
      AddingItems:
        to: [ValidatingCustomer]

Transitions of states that already exist are merged, not replaced.
"""

from __future__ import annotations

from typing import Mapping, Optional, Sequence

from ..core.query_types import OrderProcessState


DEFAULT_ORDER_PROCESS: dict[str, list[str]] = {
    "Created": ["AddingItems", "Draft"],
    "Draft": ["Cancelled", "ArrangingPayment"],
    "AddingItems": ["ArrangingPayment", "Cancelled"],
    "ArrangingPayment": ["PaymentAuthorized", "PaymentSettled", "AddingItems", "Cancelled"],
    "PaymentAuthorized": ["PaymentSettled", "Cancelled", "Modifying", "ArrangingAdditionalPayment"],
    "PaymentSettled": [
        "PartiallyDelivered",
        "Delivered",
        "PartiallyShipped",
        "Shipped",
        "Cancelled",
        "Modifying",
        "ArrangingAdditionalPayment",
    ],
    "ArrangingAdditionalPayment": ["PaymentAuthorized", "PaymentSettled", "ArrangingPayment", "Cancelled"],
    "PartiallyShipped": ["Shipped", "PartiallyDelivered", "Cancelled", "Modifying"],
    "Shipped": ["PartiallyDelivered", "Delivered", "Cancelled", "Modifying"],
    "PartiallyDelivered": ["Delivered", "Cancelled", "Modifying"],
    "Delivered": ["Cancelled"],
    "Modifying": [
        "PaymentAuthorized",
        "PaymentSettled",
        "PartiallyShipped",
        "Shipped",
        "PartiallyDelivered",
        "ArrangingAdditionalPayment",
    ],
    "Cancelled": [],
}


def merge_transitions(
    base: Mapping[str, Sequence[str]],
    extra: Mapping[str, Sequence[str]],
) -> dict[str, list[str]]:
    """Merge two transition maps, appending new targets without duplicates."""
    merged = {state: list(targets) for state, targets in base.items()}
    for state, targets in extra.items():
        existing = merged.setdefault(state, [])
        for target in targets:
            if target not in existing:
                existing.append(target)
    return merged


class OrderService:
    """Exposes the order process states. Computed once, read-only afterwards."""

    def __init__(self, custom_states: Optional[Mapping[str, Sequence[str]]] = None):
        transitions = merge_transitions(DEFAULT_ORDER_PROCESS, custom_states or {})
        self._states = tuple(
            OrderProcessState(name=name, to=targets)
            for name, targets in transitions.items()
        )

    def get_order_process_states(self) -> list[OrderProcessState]:
        return list(self._states)
