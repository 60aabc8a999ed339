from sqlalchemy import Date, ForeignKey, Numeric, String, CheckConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship
from typing import TYPE_CHECKING
import datetime
from decimal import Decimal
from coopboard.models.base import BaseModel
if TYPE_CHECKING:
    from coopboard.models.family import Family

UNKNOWN_FAMILY = "Unknown"


class TimeContribution(BaseModel):
    """Volunteer hours logged by a family. Not capacity bound."""

    __tablename__ = "time_contributions"
    __table_args__ = (
        CheckConstraint("hours >= 0", name="ck_time_contributions_hours"),
    )

    family_id: Mapped[int] = mapped_column(
        ForeignKey("families.id", ondelete="CASCADE"), nullable=False, index=True
    )
    hours: Mapped[Decimal] = mapped_column(Numeric(6, 2), nullable=False)
    activity: Mapped[str] = mapped_column(String(500), nullable=False)
    date: Mapped[datetime.date] = mapped_column(Date, nullable=False, default=datetime.date.today, index=True)

    family: Mapped["Family"] = relationship(
        "Family", back_populates="contributions", lazy="selectin"
    )

    @property
    def family_name(self) -> str:
        return self.family.display_name if self.family else UNKNOWN_FAMILY
