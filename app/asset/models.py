# app/asset/models.py
from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, ForeignKey, String
from sqlalchemy.orm import relationship
from app.core.database import Base, new_id
from app.asset.lifecycle import AssetStatus


class Employee(Base):
    __tablename__ = "employees"

    id = Column(String, primary_key=True, default=new_id)
    full_name = Column(String, nullable=False)
    email = Column(String, unique=True, nullable=True)

    assets = relationship("Asset", back_populates="holder")


class Asset(Base):
    __tablename__ = "assets"

    id = Column(String, primary_key=True, default=new_id)
    asset_tag = Column(String, unique=True, index=True, nullable=False)
    name = Column(String, nullable=False)
    category = Column(String, nullable=True)
    serial_number = Column(String, nullable=True)
    status = Column(String, nullable=False, default=AssetStatus.AVAILABLE.value, index=True)
    location = Column(String, nullable=True)

    assigned_to = Column(String, ForeignKey("employees.id"), nullable=True)
    assigned_at = Column(DateTime(timezone=True), nullable=True)
    last_checkout = Column(DateTime(timezone=True), nullable=True)
    last_checkin = Column(DateTime(timezone=True), nullable=True)

    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        index=True,
    )

    holder = relationship("Employee", back_populates="assets")
