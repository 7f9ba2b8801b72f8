"""User ORM: people who own records."""

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from recordbook.db.base import Base


class User(Base):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    email: Mapped[str] = mapped_column(Text, nullable=False)
    role: Mapped[str] = mapped_column(Text, nullable=False, default="Viewer")
