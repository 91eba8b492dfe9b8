# app/asset/store.py
from fastapi import Depends
from sqlalchemy import select, update
from sqlalchemy.orm import Session, joinedload

from app.core.database import get_db
from app.asset.models import Asset


class AssetStore:
    """
    Row access to the ``assets`` table.

    Four operations only: select with the optional holder join, select one
    by id, update by id, insert returning the row. SQLAlchemy errors roll
    the session back and propagate to the caller.
    """

    def __init__(self, db: Session):
        self.db = db

    def _query(self):
        return select(Asset).options(joinedload(Asset.holder))

    def select(self, *criteria, order_by=None) -> list[Asset]:
        stmt = self._query()
        if criteria:
            stmt = stmt.where(*criteria)
        if order_by is not None:
            stmt = stmt.order_by(order_by)
        return list(self.db.scalars(stmt).unique().all())

    def select_by_id(self, asset_id: str) -> Asset | None:
        stmt = self._query().where(Asset.id == asset_id)
        return self.db.scalars(stmt).unique().first()

    def update_by_id(self, asset_id: str, values: dict) -> int:
        stmt = update(Asset).where(Asset.id == asset_id).values(**values)
        try:
            result = self.db.execute(stmt)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        return result.rowcount

    def insert(self, values: dict) -> Asset:
        asset = Asset(**values)
        self.db.add(asset)
        try:
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        self.db.refresh(asset)
        return asset


def get_asset_store(db: Session = Depends(get_db)) -> AssetStore:
    return AssetStore(db)
