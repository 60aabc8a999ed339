from sqlalchemy import String, Boolean
from sqlalchemy.orm import relationship, Mapped, mapped_column
from typing import List, TYPE_CHECKING
from coopboard.models.base import BaseModel
if TYPE_CHECKING:
    from coopboard.models.contribution import TimeContribution


class Family(BaseModel):
    """
    A parent household account.
    Families are seeded out of band and never edited through the API.
    """

    __tablename__ = "families"

    # Stored lower-case; login lookups normalise the input the same way
    username: Mapped[str] = mapped_column(String(50), unique=True, index=True)
    display_name: Mapped[str] = mapped_column(String(100), nullable=False)

    # Capabilities
    is_admin: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    # Relationships
    contributions: Mapped[List["TimeContribution"]] = relationship(
        "TimeContribution",
        back_populates="family",
        cascade="all, delete-orphan",
        lazy="select"
    )
