# tests/test_asset_lifecycle.py
from datetime import datetime, timezone

import pytest

from app.asset import lifecycle
from app.asset.lifecycle import AssetAction, AssetStatus
from app.asset.schemas import AssetCreate, AssetStats
from app.asset import services as asset_service
from app.asset.store import AssetStore

FIXED = datetime(2026, 3, 1, 9, 30, tzinfo=timezone.utc)


def test_mark_available_values():
    assert lifecycle.mark_available(FIXED) == {
        "status": "available",
        "assigned_to": None,
        "assigned_at": None,
        "last_checkin": FIXED,
    }


def test_mark_in_use_never_writes_holder():
    values = lifecycle.mark_in_use(FIXED)
    assert values == {"status": "in_use", "last_checkout": FIXED}
    assert "assigned_to" not in values
    assert lifecycle.PENDING_HOLDER_SELECTION


def test_transition_values_defaults_to_now():
    values = lifecycle.transition_values(AssetAction.MARK_AVAILABLE)
    assert values["last_checkin"].tzinfo is not None


@pytest.mark.parametrize(
    "status, holder, expected",
    [
        ("available", None, True),
        ("available", "emp-1", False),
        ("in_use", "emp-1", True),
        ("in_use", None, False),
        ("maintenance", None, True),
        ("retired", "emp-1", True),
    ],
)
def test_holder_invariant(status, holder, expected):
    assert lifecycle.holder_invariant_holds(status, holder) is expected


def test_status_labels():
    assert lifecycle.status_label("in_use") == "In Use"
    assert lifecycle.status_label("retired") == "Retired"
    assert lifecycle.status_label("scrapped") == "scrapped"


def test_stats_total_matches_sum():
    stats = AssetStats()
    for status in [s.value for s in AssetStatus] + ["scrapped"]:
        stats.add(status)
    assert stats.total == 6
    assert stats.other == 1
    assert stats.total == sum(
        getattr(stats, s.value) for s in AssetStatus
    ) + stats.other


def test_apply_action_uses_given_time(db):
    store = AssetStore(db)
    created = asset_service.create_asset(store, AssetCreate(asset_tag="VAN-7", name="Transit van"))

    detail = asset_service.apply_action(store, created.id, AssetAction.MARK_IN_USE, now=FIXED)
    assert detail.status == "in_use"
    assert detail.assigned_to is None

    row = store.select_by_id(created.id)
    assert row.last_checkout.replace(tzinfo=None) == FIXED.replace(tzinfo=None)
