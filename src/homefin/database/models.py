"""SQLAlchemy models for homefin database."""

from sqlalchemy import (
    Column,
    Integer,
    String,
    ForeignKey,
    Date,
    Numeric,
    Boolean,
    CheckConstraint,
    create_engine,
    event,
)
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, relationship, sessionmaker, Session

Base = declarative_base()


class Income(Base):
    """Income entry model."""

    __tablename__ = "income"

    id = Column(Integer, primary_key=True)
    description = Column(String, nullable=False)
    category = Column(String, nullable=False)
    amount = Column(Numeric(10, 2), nullable=False)
    date = Column(Date, nullable=False, index=True)
    is_recurring = Column(Boolean, default=False, nullable=False)


class Expense(Base):
    """Planned expense model."""

    __tablename__ = "expenses"

    id = Column(Integer, primary_key=True)
    description = Column(String, nullable=False)
    category = Column(String, nullable=False)
    amount_planned = Column(Numeric(10, 2), nullable=False)
    amount_actual = Column(Numeric(10, 2), nullable=True)
    due_date = Column(Date, nullable=False, index=True)
    status = Column(String, default="pending", nullable=False)
    is_recurring = Column(Boolean, default=False, nullable=False)
    notes = Column(String, nullable=True)


class CreditCard(Base):
    """Credit card model."""

    __tablename__ = "credit_cards"

    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False)
    credit_limit = Column(Numeric(10, 2), nullable=False)
    closing_day = Column(Integer, nullable=False)
    due_day = Column(Integer, nullable=False)

    # No cascade: a card with transactions cannot be deleted
    transactions = relationship("CardTransaction", back_populates="card")


class CardTransaction(Base):
    """Card purchase model."""

    __tablename__ = "card_transactions"

    id = Column(Integer, primary_key=True)
    card_id = Column(Integer, ForeignKey("credit_cards.id"), nullable=False)
    description = Column(String, nullable=False)
    amount = Column(Numeric(10, 2), nullable=False)
    date = Column(Date, nullable=False, index=True)
    installments_total = Column(Integer, default=1, nullable=False)
    installment_current = Column(Integer, default=1, nullable=False)
    buyer_type = Column(String, default="user", nullable=False)
    third_party_name = Column(String, nullable=True)

    __table_args__ = (
        CheckConstraint("installments_total >= 1", name="ck_installments_total_positive"),
    )

    # Relationships
    card = relationship("CreditCard", back_populates="transactions")


class ThirdPartyDebt(Base):
    """Debt owed to the user by a third party."""

    __tablename__ = "third_party_debts"

    id = Column(Integer, primary_key=True)
    person_name = Column(String, nullable=False)
    amount = Column(Numeric(10, 2), nullable=False)
    date = Column(Date, nullable=False)
    origin = Column(String, nullable=True)
    status = Column(String, default="pending", nullable=False)


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    engine: Engine = create_engine(database_url, echo=False)
    if engine.dialect.name == "sqlite":
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
