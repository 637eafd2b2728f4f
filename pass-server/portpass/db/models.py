"""SQLAlchemy ORM models."""
import uuid
from sqlalchemy import Boolean, Column, Date, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from portpass.infrastructure.database.base import Base


def generate_uuid() -> str:
    return str(uuid.uuid4())


# ``seq`` is an auto-incrementing surrogate key recording insertion order; the
# public identifier is the UUID in ``id``. All timestamps are stored UTC-naive.


class Transaction(Base):
    __tablename__ = "transactions"

    seq = Column(Integer, primary_key=True, autoincrement=True)
    id = Column(String(36), unique=True, nullable=False, index=True, default=generate_uuid)
    payer_name = Column(String(200), nullable=False)
    payer_email = Column(String(200))
    payer_phone = Column(String(50))
    total_amount_cents = Column(Integer, nullable=False)
    slip_filename = Column(String(255), nullable=False)
    created_at = Column(DateTime, nullable=False)

    passes = relationship("Pass", back_populates="transaction")


class Pass(Base):
    __tablename__ = "passes"

    seq = Column(Integer, primary_key=True, autoincrement=True)
    id = Column(String(36), unique=True, nullable=False, index=True, default=generate_uuid)
    transaction_id = Column(String(36), ForeignKey("transactions.id"), nullable=False, index=True)
    staff_id = Column(String(36), nullable=False, index=True)
    customer_name = Column(String(200), nullable=False)
    pass_type = Column(String(20), nullable=False)
    id_number = Column(String(50))
    plate_number = Column(String(50))
    valid_date = Column(Date, nullable=False)
    pass_number = Column(String(50), unique=True, nullable=False, index=True)
    amount_cents = Column(Integer, nullable=False)
    qr_code = Column(Text, nullable=False)
    created_at = Column(DateTime, nullable=False, index=True)

    transaction = relationship("Transaction", back_populates="passes")


class Staff(Base):
    __tablename__ = "staff"

    seq = Column(Integer, primary_key=True, autoincrement=True)
    id = Column(String(36), unique=True, nullable=False, index=True, default=generate_uuid)
    username = Column(String(50), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    full_name = Column(String(200), nullable=False)
    designation = Column(String(100), nullable=False)
    department = Column(String(100), nullable=False)
    is_admin = Column(Boolean, nullable=False, default=False)
    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime, nullable=False)
    updated_at = Column(DateTime, nullable=False)
