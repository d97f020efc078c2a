"""Priority badge lookup.

Linear encodes priority as a small integer: 0 = none, 1 = urgent, 2 = high,
3 = medium, 4 = low.
"""

from typing import NamedTuple


class PriorityLabel(NamedTuple):
    """Human-readable label and badge style for a priority."""

    label: str
    style: str


NO_PRIORITY = PriorityLabel("None", "bg-gray-100 text-gray-800")

PRIORITY_LABELS: dict[int, PriorityLabel] = {
    1: PriorityLabel("Urgent", "bg-red-100 text-red-800"),
    2: PriorityLabel("High", "bg-orange-100 text-orange-800"),
    3: PriorityLabel("Medium", "bg-yellow-100 text-yellow-800"),
    4: PriorityLabel("Low", "bg-green-100 text-green-800"),
}


def label_for(priority: int) -> PriorityLabel:
    """Map a priority to its badge. Unknown values fall back to "None"."""
    return PRIORITY_LABELS.get(priority, NO_PRIORITY)
