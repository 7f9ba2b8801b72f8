"""Category ORM: record classification."""

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from recordbook.db.base import Base


class Category(Base):
    __tablename__ = "categories"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
