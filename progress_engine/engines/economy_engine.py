"""Economy Engine - Pure logic for XP rewards and bonus multiplier windows.

This engine provides stateless, pure Python functions for:
- Bonus multiplier arithmetic (floored to whole XP)
- Active bonus event selection for an instant
- Bonus event countdowns for display
- Base XP lookup per trigger source and award calculation

ARCHITECTURE: This is a pure logic engine with NO storage access.
All functions are static methods that operate on passed-in data.
Bonus event lifecycle (create, deactivate) belongs to the admin workflow;
writing the awarded XP belongs to the award/trigger layer.

Eligibility vs display:
    An event is *eligible* (get_active_bonus_event) only when its stored
    is_active flag is set AND now lies in [starts_at, ends_at].
    The countdown (get_bonus_countdown) trusts the time bound alone: once
    ends_at has passed it reports "Ended" even if is_active was never cleared.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime
from typing import TYPE_CHECKING

from .. import const
from ..exceptions import InvalidTimestampError
from ..utils.dt_utils import as_utc, dt_format_clock, dt_now_utc, dt_to_utc
from ..utils.math_utils import floor_multiply

if TYPE_CHECKING:
    from ..type_defs import BonusCountdown, BonusEvent, Timestamp, XPAward


class UnknownXPSourceError(KeyError):
    """Raised when an XP source has no entry in the XP schedule.

    Attributes:
        source: The unrecognised source name
    """

    def __init__(self, source: str) -> None:
        """Initialize UnknownXPSourceError.

        Args:
            source: The unrecognised source name
        """
        self.source = source
        super().__init__(f"Unknown XP source: {source}")


def _event_bound(event: BonusEvent, field: str) -> datetime:
    """Parse a bonus event time bound, raising on malformed data."""
    raw_value: Timestamp | None = event.get(field)  # type: ignore[assignment]
    parsed = dt_to_utc(raw_value)
    if parsed is None:
        raise InvalidTimestampError(field, raw_value)
    return parsed


class EconomyEngine:
    """Pure logic engine for XP rewards.

    All methods are static - no instance state.

    Time-dependent methods take an optional `now`. When it is omitted they
    read the clock exactly once, so every field of the result describes the
    same instant.
    """

    @staticmethod
    def apply_bonus_multiplier(base_xp: int, multiplier: float) -> int:
        """Apply a reward multiplier to a base XP amount.

        floor(base_xp * multiplier): fractions are truncated, never rounded.
        A multiplier of 1 is the identity and multipliers below 1 reduce the
        award. Bonus events only use multipliers above 1 by convention of the
        admin workflow; this method does not enforce it.

        Args:
            base_xp: Base XP amount (>= 0)
            multiplier: Multiplier to apply (> 0)

        Returns:
            Whole-number XP after the multiplier
        """
        return floor_multiply(base_xp, multiplier)

    @staticmethod
    def is_event_in_effect(event: BonusEvent, now: datetime) -> bool:
        """Return True if the event is flagged active and now is in its window.

        Both bounds are inclusive.
        """
        if not event.get("is_active", False):
            return False
        current = as_utc(now)
        return (
            _event_bound(event, "starts_at") <= current <= _event_bound(event, "ends_at")
        )

    @staticmethod
    def get_active_bonus_event(
        events: Iterable[BonusEvent],
        now: datetime | None = None,
    ) -> BonusEvent | None:
        """Return the bonus event in effect at `now`, or None.

        None means "no bonus", i.e. multiplier 1, not multiplier 0.
        At most one event should qualify; overlapping active windows are a
        data problem for the admin workflow. If they occur, the first match in
        input order is returned and a warning is logged.

        Args:
            events: Bonus event rows from storage
            now: Instant to evaluate (defaults to a single clock read)

        Returns:
            The qualifying event, or None
        """
        current = now or dt_now_utc()
        matches = [
            event
            for event in events
            if EconomyEngine.is_event_in_effect(event, current)
        ]

        if not matches:
            return None

        if len(matches) > 1:
            const.LOGGER.warning(
                "Overlapping active bonus events at %s: %s; using '%s'",
                current.isoformat(),
                [event.get("title") for event in matches],
                matches[0].get("title"),
            )

        const.LOGGER.debug(
            "Active bonus event: '%s' (x%s)",
            matches[0].get("title"),
            matches[0].get("multiplier"),
        )
        return matches[0]

    @staticmethod
    def get_effective_multiplier(
        events: Iterable[BonusEvent],
        now: datetime | None = None,
    ) -> float:
        """Return the multiplier in effect at `now` (1.0 when no event)."""
        active = EconomyEngine.get_active_bonus_event(events, now)
        if active is None:
            return const.DEFAULT_BONUS_MULTIPLIER
        return float(active["multiplier"])

    @staticmethod
    def get_bonus_countdown(
        event: BonusEvent,
        now: datetime | None = None,
    ) -> BonusCountdown:
        """Compute the time left before a bonus event ends.

        remaining = ends_at - now. When remaining <= 0 the event is reported
        as ended whatever its stored is_active flag says. Display timers must
        call this on every tick rather than counting down locally.

        Args:
            event: Bonus event row
            now: Instant to evaluate (defaults to a single clock read)

        Returns:
            BonusCountdown with `ended`, whole `remaining_seconds` and display
            text ("HH:MM:SS" or "Ended")
        """
        current = as_utc(now or dt_now_utc())
        remaining = _event_bound(event, "ends_at") - current

        if remaining.total_seconds() <= 0:
            return {
                "ended": True,
                "remaining_seconds": 0,
                "display": const.DISPLAY_BONUS_ENDED,
            }

        return {
            "ended": False,
            "remaining_seconds": int(remaining.total_seconds()),
            "display": dt_format_clock(remaining),
        }

    @staticmethod
    def get_base_xp(
        source: str,
        schedule: dict[str, int] | None = None,
    ) -> int:
        """Return the base XP for a trigger source.

        Args:
            source: XP source name (e.g., "login", "submission")
            schedule: Optional schedule override (defaults to const.XP_SCHEDULE)

        Returns:
            Base XP amount; 0 for sources whose amount is set at call time

        Raises:
            UnknownXPSourceError: If the source is not in the schedule
        """
        table = const.XP_SCHEDULE if schedule is None else schedule
        try:
            return table[source]
        except KeyError as err:
            raise UnknownXPSourceError(source) from err

    @staticmethod
    def calculate_award(
        base_xp: int,
        events: Iterable[BonusEvent] = (),
        now: datetime | None = None,
    ) -> XPAward:
        """Calculate the XP granted for one trigger, applying any bonus event.

        Args:
            base_xp: Base XP for the trigger (see get_base_xp)
            events: Bonus event rows from storage
            now: Instant of the trigger (defaults to a single clock read)

        Returns:
            XPAward with the multiplier used and the final XP
        """
        active = EconomyEngine.get_active_bonus_event(events, now or dt_now_utc())
        multiplier = (
            float(active["multiplier"])
            if active is not None
            else const.DEFAULT_BONUS_MULTIPLIER
        )

        return {
            "base_xp": base_xp,
            "multiplier": multiplier,
            "xp_awarded": EconomyEngine.apply_bonus_multiplier(base_xp, multiplier),
            "bonus_event_title": active.get("title") if active is not None else None,
        }
