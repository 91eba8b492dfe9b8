# app/asset/services.py
from datetime import datetime

from sqlalchemy.exc import SQLAlchemyError
from app.asset import lifecycle
from app.asset.lifecycle import AssetAction, AssetStatus
from app.asset.models import Asset
from app.asset.schemas import AssetCreate, AssetDetail, AssetListItem, AssetStats
from app.asset.store import AssetStore
from app.core.errors import NotFoundError, StoreError, StoreWriteError
from app.core.logging import get_logger

logger = get_logger("asset")


def _holder_name(asset: Asset) -> str | None:
    return asset.holder.full_name if asset.holder is not None else None


def to_list_item(asset: Asset) -> AssetListItem:
    return AssetListItem(
        id=asset.id,
        asset_tag=asset.asset_tag,
        name=asset.name,
        category=asset.category,
        status=asset.status,
        location=asset.location,
        assigned_to=asset.assigned_to,
        employee_name=_holder_name(asset),
    )


def to_detail(asset: Asset) -> AssetDetail:
    return AssetDetail(
        id=asset.id,
        asset_tag=asset.asset_tag,
        name=asset.name,
        category=asset.category,
        serial_number=asset.serial_number,
        status=asset.status,
        location=asset.location,
        assigned_to=asset.assigned_to,
        employee_name=_holder_name(asset),
        assigned_at=asset.assigned_at,
        last_checkout=asset.last_checkout,
        last_checkin=asset.last_checkin,
    )


def list_assets(store: AssetStore) -> list[AssetListItem]:
    """Newest first. A failed read is logged and shown as an empty list."""
    try:
        rows = store.select(order_by=Asset.created_at.desc())
    except SQLAlchemyError:
        logger.exception("Failed to load assets")
        return []
    return [to_list_item(row) for row in rows]


def summarize_assets(items: list[AssetListItem]) -> AssetStats:
    # TODO: replace with a GROUP BY on status once the asset list is paginated
    stats = AssetStats()
    for item in items:
        stats.add(item.status)
    return stats


def get_asset(store: AssetStore, asset_id: str) -> AssetDetail:
    try:
        asset = store.select_by_id(asset_id)
    except SQLAlchemyError:
        logger.exception("Failed to load asset %s", asset_id)
        raise NotFoundError("Asset not found")
    if asset is None:
        raise NotFoundError("Asset not found")
    return to_detail(asset)


def create_asset(store: AssetStore, payload: AssetCreate) -> AssetDetail:
    values = payload.model_dump()
    values["status"] = AssetStatus.AVAILABLE.value
    try:
        asset = store.insert(values)
    except SQLAlchemyError as exc:
        logger.warning("Asset insert rejected: %s", exc)
        raise StoreWriteError(_raw_message(exc))
    logger.info("Created asset %s (%s)", asset.id, asset.asset_tag)
    return to_detail(asset)


def apply_action(
    store: AssetStore,
    asset_id: str,
    action: AssetAction,
    now: datetime | None = None,
) -> AssetDetail:
    values = lifecycle.transition_values(action, now)
    try:
        matched = store.update_by_id(asset_id, values)
    except SQLAlchemyError:
        logger.exception("Failed to apply %s to asset %s", action.value, asset_id)
        raise StoreError("Could not update asset")
    if not matched:
        raise NotFoundError("Asset not found")

    detail = get_asset(store, asset_id)
    if not lifecycle.holder_invariant_holds(detail.status, detail.assigned_to):
        logger.warning(
            "Asset %s is %s with holder %s after %s",
            asset_id, detail.status, detail.assigned_to, action.value,
        )
    return detail


def _raw_message(exc: SQLAlchemyError) -> str:
    orig = getattr(exc, "orig", None)
    return str(orig) if orig is not None else str(exc)
