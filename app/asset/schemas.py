# app/asset/schemas.py
from datetime import datetime

from pydantic import BaseModel, Field, computed_field
from app.asset import lifecycle
from app.asset.lifecycle import AssetStatus


class AssetCreate(BaseModel):
    asset_tag: str
    name: str
    category: str | None = None
    serial_number: str | None = None
    location: str | None = None


class AssetListItem(BaseModel):
    id: str
    asset_tag: str
    name: str
    category: str | None = None
    status: str
    location: str | None = None
    assigned_to: str | None = None
    employee_name: str | None = None


class AssetDetail(BaseModel):
    id: str
    asset_tag: str
    name: str
    category: str | None = None
    serial_number: str | None = None
    status: str
    location: str | None = None
    assigned_to: str | None = None
    employee_name: str | None = None
    assigned_at: datetime | None = None
    last_checkout: datetime | None = None
    last_checkin: datetime | None = None

    @computed_field
    @property
    def status_label(self) -> str:
        return lifecycle.status_label(self.status)

    @computed_field
    @property
    def holder_display(self) -> str:
        return self.employee_name or lifecycle.NO_HOLDER_LABEL


class AssetStats(BaseModel):
    """Counts over every status, so total always equals the sum of the rest."""
    total: int = 0
    available: int = 0
    in_use: int = 0
    maintenance: int = 0
    lost: int = 0
    retired: int = 0
    other: int = Field(default=0, description="Rows whose status is outside the known set")

    def add(self, status: str) -> None:
        self.total += 1
        try:
            key = AssetStatus(status).value
        except ValueError:
            key = "other"
        setattr(self, key, getattr(self, key) + 1)
