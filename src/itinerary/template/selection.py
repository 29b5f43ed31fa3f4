# SPDX-License-Identifier: MIT

from itinerary.model.selection import EmptySelection, SelectionState


def get_selection_template() -> EmptySelection:
    return {
        "state": SelectionState.EMPTY,
        "starts_at": None,
        "ends_at": None,
    }
