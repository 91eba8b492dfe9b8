# app/asset/lifecycle.py
"""
Asset lifecycle rules.

Only two actions exist. Both are unconditional: they never look at the
current status, so any state can move to ``available`` or ``in_use``.
``maintenance``, ``lost`` and ``retired`` are display-only here.

Intended pairing of status and holder: ``available`` means no holder and
``in_use`` means a holder was picked. Nothing enforces it; ``mark_in_use``
cannot pick a holder yet (see ``PENDING_HOLDER_SELECTION``).
"""
import enum
from datetime import datetime, timezone


class AssetStatus(str, enum.Enum):
    AVAILABLE = "available"
    IN_USE = "in_use"
    MAINTENANCE = "maintenance"
    LOST = "lost"
    RETIRED = "retired"


class AssetAction(str, enum.Enum):
    MARK_AVAILABLE = "mark-available"
    MARK_IN_USE = "mark-in-use"


STATUS_LABELS = {
    AssetStatus.IN_USE: "In Use",
    AssetStatus.AVAILABLE: "Available",
    AssetStatus.MAINTENANCE: "Maintenance",
    AssetStatus.LOST: "Lost",
    AssetStatus.RETIRED: "Retired",
}

NO_HOLDER_LABEL = "— Available —"

# Mark In Use has no pick-holder step yet, so it never writes assigned_to.
PENDING_HOLDER_SELECTION = True


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def status_label(status: str) -> str:
    try:
        return STATUS_LABELS[AssetStatus(status)]
    except ValueError:
        return status


def mark_available(now: datetime) -> dict:
    return {
        "status": AssetStatus.AVAILABLE.value,
        "assigned_to": None,
        "assigned_at": None,
        "last_checkin": now,
    }


def mark_in_use(now: datetime) -> dict:
    return {
        "status": AssetStatus.IN_USE.value,
        "last_checkout": now,
    }


TRANSITIONS = {
    AssetAction.MARK_AVAILABLE: mark_available,
    AssetAction.MARK_IN_USE: mark_in_use,
}


def transition_values(action: AssetAction, now: datetime | None = None) -> dict:
    """Fields to write for ``action``; ``now`` defaults to the current UTC time."""
    return TRANSITIONS[action](now or utcnow())


def holder_invariant_holds(status: str, assigned_to: str | None) -> bool:
    if status == AssetStatus.AVAILABLE.value:
        return assigned_to is None
    if status == AssetStatus.IN_USE.value:
        return assigned_to is not None
    return True
