# app/asset/routes.py
from fastapi import APIRouter, Depends, Response
from app.asset import services as asset_service
from app.asset.lifecycle import AssetAction
from app.asset.schemas import AssetCreate, AssetDetail, AssetListItem, AssetStats
from app.asset.store import AssetStore, get_asset_store

router = APIRouter(prefix="/api/assets", tags=["Assets"])


@router.get("", response_model=list[AssetListItem])
def list_all(store: AssetStore = Depends(get_asset_store)):
    return asset_service.list_assets(store)


@router.get("/stats", response_model=AssetStats)
def stats(store: AssetStore = Depends(get_asset_store)):
    return asset_service.summarize_assets(asset_service.list_assets(store))


@router.post("", response_model=AssetDetail, status_code=201)
def create(asset: AssetCreate, response: Response, store: AssetStore = Depends(get_asset_store)):
    created = asset_service.create_asset(store, asset)
    response.headers["Location"] = f"{router.prefix}/{created.id}"
    return created


@router.get("/{asset_id}", response_model=AssetDetail)
def get(asset_id: str, store: AssetStore = Depends(get_asset_store)):
    return asset_service.get_asset(store, asset_id)


@router.post("/{asset_id}/mark-available", response_model=AssetDetail)
def mark_available(asset_id: str, store: AssetStore = Depends(get_asset_store)):
    return asset_service.apply_action(store, asset_id, AssetAction.MARK_AVAILABLE)


@router.post("/{asset_id}/mark-in-use", response_model=AssetDetail)
def mark_in_use(asset_id: str, store: AssetStore = Depends(get_asset_store)):
    return asset_service.apply_action(store, asset_id, AssetAction.MARK_IN_USE)
