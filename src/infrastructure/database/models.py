"""SQLAlchemy ORM models for ledger and lending entities."""

from datetime import date, datetime

from sqlalchemy import (
    Date,
    DateTime,
    ForeignKey,
    Integer,
    Numeric,
    String,
    Text,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship


class Base(DeclarativeBase):
    pass


def _money() -> Numeric:
    return Numeric(12, 2, asdecimal=False)


class CategoryModel(Base):
    """Income/expense category."""

    __tablename__ = "categories"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    type: Mapped[str] = mapped_column(String(20), nullable=False, index=True)


class ClientModel(Base):
    """Persisted borrower record."""

    __tablename__ = "clients"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    birthdate: Mapped[date] = mapped_column(Date, nullable=False)
    voter_id: Mapped[str] = mapped_column(String(50), nullable=False)
    address: Mapped[str] = mapped_column(Text, nullable=False)
    neighborhood: Mapped[str] = mapped_column(String(255), nullable=False)
    zip_code: Mapped[str] = mapped_column(String(10), nullable=False)
    municipality: Mapped[str] = mapped_column(String(255), nullable=False)
    state: Mapped[str] = mapped_column(String(255), nullable=False)
    phone: Mapped[str] = mapped_column(String(30), nullable=False)
    cellphone: Mapped[str] = mapped_column(String(30), nullable=False)
    message_phone: Mapped[str] = mapped_column(String(30), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    assignment: Mapped[str] = mapped_column(String(255), nullable=False)
    promoter: Mapped[str] = mapped_column(String(255), nullable=False)
    supervisor: Mapped[str] = mapped_column(String(255), nullable=False)
    executive: Mapped[str] = mapped_column(String(255), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(),
        nullable=False,
        default=datetime.utcnow,
    )

    contracts: Mapped[list["ContractModel"]] = relationship(
        "ContractModel",
        back_populates="client",
    )


class AvalModel(Base):
    """Persisted guarantor record."""

    __tablename__ = "avales"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    birthdate: Mapped[date] = mapped_column(Date, nullable=False)
    voter_id: Mapped[str] = mapped_column(String(50), nullable=False)
    address: Mapped[str] = mapped_column(Text, nullable=False)
    neighborhood: Mapped[str] = mapped_column(String(255), nullable=False)
    zip_code: Mapped[str] = mapped_column(String(10), nullable=False)
    municipality: Mapped[str] = mapped_column(String(255), nullable=False)
    state: Mapped[str] = mapped_column(String(255), nullable=False)
    phone: Mapped[str] = mapped_column(String(30), nullable=False)
    cellphone: Mapped[str] = mapped_column(String(30), nullable=False)
    message_phone: Mapped[str] = mapped_column(String(30), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    group: Mapped[str] = mapped_column("grupo", String(100), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(),
        nullable=False,
        default=datetime.utcnow,
    )

    contracts: Mapped[list["ContractModel"]] = relationship(
        "ContractModel",
        back_populates="aval",
    )


class ContractModel(Base):
    """
    Persisted loan contract.

    Client and aval foreign keys carry no ON DELETE rule. Orphaned
    clients/avales are removed by the contract service in the same
    transaction as the contract delete.
    """

    __tablename__ = "contracts"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    folio: Mapped[str] = mapped_column(String(50), nullable=False, unique=True)
    client_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("clients.id"),
        nullable=False,
        index=True,
    )
    aval_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("avales.id"),
        nullable=False,
        index=True,
    )
    amount: Mapped[float] = mapped_column(_money(), nullable=False)
    interest_rate: Mapped[float] = mapped_column(Numeric(6, 2, asdecimal=False), nullable=False)
    term_weeks: Mapped[int] = mapped_column(Integer, nullable=False)
    weekly_payment: Mapped[float] = mapped_column(_money(), nullable=False)
    start_date: Mapped[date] = mapped_column(Date, nullable=False)
    status: Mapped[str] = mapped_column(String(50), nullable=False, default="activo")
    created_at: Mapped[datetime] = mapped_column(
        DateTime(),
        nullable=False,
        default=datetime.utcnow,
    )

    client: Mapped["ClientModel"] = relationship(
        "ClientModel",
        back_populates="contracts",
    )
    aval: Mapped["AvalModel"] = relationship(
        "AvalModel",
        back_populates="contracts",
    )


class WeekModel(Base):
    """Persisted budget week."""

    __tablename__ = "weeks"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    start_date: Mapped[date] = mapped_column(Date, nullable=False, index=True)
    budget: Mapped[float] = mapped_column(_money(), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(),
        nullable=False,
        default=datetime.utcnow,
    )


class TransactionModel(Base):
    """Persisted income/expense entry."""

    __tablename__ = "transactions"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    date: Mapped[date] = mapped_column(Date, nullable=False, index=True)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    type: Mapped[str] = mapped_column(String(20), nullable=False)
    category_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("categories.id"),
        nullable=False,
    )
    amount: Mapped[float] = mapped_column(_money(), nullable=False)
    week_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("weeks.id"),
        nullable=False,
        index=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(),
        nullable=False,
        default=datetime.utcnow,
    )
