"""SQLAlchemy models for the farmledger record store."""

from datetime import datetime, UTC
from sqlalchemy import (
    JSON,
    Column,
    Date,
    DateTime,
    Float,
    ForeignKey,
    Integer,
    String,
    UniqueConstraint,
    create_engine,
)
from sqlalchemy.orm import declarative_base, relationship, sessionmaker, Session

Base = declarative_base()


class User(Base):
    """Platform user model."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True)
    name = Column(String, unique=True, nullable=False)
    occupations = Column(JSON, nullable=False, default=list)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    # Relationships
    sales = relationship("Sale", back_populates="user", cascade="all, delete-orphan")
    expenses = relationship("Expense", back_populates="user", cascade="all, delete-orphan")


class Sale(Base):
    """Sale record model. Line items are stored as parallel JSON arrays."""

    __tablename__ = "sales"

    id = Column(Integer, primary_key=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    external_id = Column(Integer, nullable=True)
    sale_date = Column(Date, nullable=False)
    occupation = Column(String, nullable=True)
    items_sold = Column(JSON, nullable=False, default=list)
    quantities_sold = Column(JSON, nullable=False, default=list)
    prices_per_unit = Column(JSON, nullable=True)
    imported_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    __table_args__ = (UniqueConstraint("user_id", "external_id", name="uq_sale_user_external_id"),)

    # Relationships
    user = relationship("User", back_populates="sales")


class Expense(Base):
    """Expense record model."""

    __tablename__ = "expenses"

    id = Column(Integer, primary_key=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    external_id = Column(Integer, nullable=True)
    date_created = Column(Date, nullable=False)
    occupation = Column(String, nullable=True)
    category = Column(String, nullable=False)
    amount = Column(Float, nullable=False)
    imported_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    __table_args__ = (UniqueConstraint("user_id", "external_id", name="uq_expense_user_external_id"),)

    # Relationships
    user = relationship("User", back_populates="expenses")


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    engine = create_engine(database_url, echo=False)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
