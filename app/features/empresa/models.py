# app/features/empresa/models.py
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import Boolean, DateTime, ForeignKey, Integer, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.utils.db import Base


def _now() -> datetime:
    return datetime.now(timezone.utc)


class Company(Base):
    __tablename__ = "companies"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), unique=True, index=True, nullable=False)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    published: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_now, server_default=func.now()
    )

    # 1:1 관계 - 회사당 접근성 정보는 최대 하나
    accessibility_details: Mapped[Optional["Accessibility"]] = relationship(
        back_populates="company", uselist=False
    )

    def __repr__(self):
        return f"<Company id={self.id} email={self.email} published={self.published}>"


class Accessibility(Base):
    __tablename__ = "accessibility_profiles"

    # PK가 곧 FK이므로 DB 차원에서 회사당 한 행만 허용됩니다.
    company_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("companies.id"), primary_key=True
    )

    # 물리적 접근성
    hallways_min_90cm: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    ramp: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    door_80cm: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    non_slip_floors: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    accessible_bathroom: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    adapted_tables_chairs: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    elevator: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    # 적응형 접근성
    braille_signage: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    color_contrast: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    podotactile_guides: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    emergency_alarms: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    hearing_aid_system: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    # 추가 정보 (선택)
    adapted_bathroom_quantity: Mapped[int | None] = mapped_column(Integer)
    adapted_bathroom_details: Mapped[str | None] = mapped_column(Text)
    priority_attention_type: Mapped[str | None] = mapped_column(String(255))
    priority_attention_schedule: Mapped[str | None] = mapped_column(String(255))
    other_services: Mapped[str | None] = mapped_column(Text)

    company: Mapped["Company"] = relationship(back_populates="accessibility_details")
