"""Court cost calculation from venue hourly rates."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from courtside.core.constants import (
    VENUE_GUEST_RATE,
    VENUE_HEATING_RATE,
    VENUE_LIGHT_RATE,
    VENUE_MEMBER_RATE,
)
from courtside.utils import parse_amount


def compute_cost(  # noqa: PLR0913
    venue: Mapping[str, Any] | None,
    duration_hours: Any,
    use_lights: bool,
    use_heating: bool,
    is_guest: bool,
    default: float = 0.0,
) -> float:
    """Return the total court cost for a match.

    The hourly rate is the guest rate when ``is_guest`` is set and the venue
    has one, otherwise the member rate. Lighting and heating surcharges are
    added to the hourly rate before multiplying by the duration. Without a
    venue or a member rate there is nothing to compute from, so ``default``
    is returned as-is.
    """
    if not venue:
        return default
    member_rate = parse_amount(venue.get(VENUE_MEMBER_RATE))
    if not member_rate:
        return default

    guest_rate = parse_amount(venue.get(VENUE_GUEST_RATE))
    hourly = guest_rate if is_guest and guest_rate else member_rate
    if use_lights:
        hourly += parse_amount(venue.get(VENUE_LIGHT_RATE))
    if use_heating:
        hourly += parse_amount(venue.get(VENUE_HEATING_RATE))

    return round(max(hourly * parse_amount(duration_hours), 0.0), 2)
