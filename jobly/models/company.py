"""
company.py
- Purpose: Company table. `handle` is the caller-chosen primary key.
"""

from sqlalchemy import CheckConstraint, Integer, String, Text
from sqlalchemy.orm import relationship, Mapped, mapped_column

from jobly.models.base import Base


class Company(Base):
    __tablename__ = "companies"

    __table_args__ = (
        CheckConstraint("num_employees >= 0", name="ck_companies_num_employees"),
    )

    handle: Mapped[str] = mapped_column(String(25), primary_key=True)
    name: Mapped[str] = mapped_column(Text, nullable=False, unique=True)
    num_employees: Mapped[int | None] = mapped_column(Integer, nullable=True)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    logo_url: Mapped[str | None] = mapped_column(Text, nullable=True)

    jobs: Mapped[list["Job"]] = relationship(
        back_populates="company",
        passive_deletes=True,
        order_by="Job.id",
    )
