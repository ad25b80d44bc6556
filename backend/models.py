# backend/models.py
import enum
import uuid

from sqlalchemy import Boolean, Column, Enum, Float, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from database import Base


def new_id() -> str:
    return str(uuid.uuid4())


class AccountType(str, enum.Enum):
    BANK = "BANK"
    CREDIT_CARD = "CREDIT_CARD"
    INVESTMENT = "INVESTMENT"


class TransactionType(str, enum.Enum):
    INCOME = "INCOME"
    EXPENSE = "EXPENSE"
    TRANSFER_OUT = "TRANSFER_OUT"
    TRANSFER_IN = "TRANSFER_IN"


class CategorySubtype(str, enum.Enum):
    FIXA = "FIXA"
    VARIAVEL = "VARIAVEL"


class Account(Base):
    __tablename__ = "accounts"

    id = Column(String, primary_key=True, default=new_id)
    user_id = Column(String, index=True, nullable=False)
    name = Column(String)
    type = Column(Enum(AccountType, native_enum=False))
    initial_balance = Column(Float)   # só BANK e INVESTMENT
    closing_day = Column(Integer)     # só CREDIT_CARD
    due_day = Column(Integer)         # só CREDIT_CARD
    is_default = Column(Boolean, default=False, nullable=False)


class Category(Base):
    __tablename__ = "categories"

    id = Column(String, primary_key=True, default=new_id)
    user_id = Column(String, index=True, nullable=False)
    name = Column(String, index=True)
    type = Column(Enum(TransactionType, native_enum=False))
    subtype = Column(Enum(CategorySubtype, native_enum=False))
    impacts_budget = Column(Boolean, default=False, nullable=False)
    icon = Column(String)


class Budget(Base):
    __tablename__ = "budgets"

    id = Column(String, primary_key=True, default=new_id)
    user_id = Column(String, index=True, nullable=False)
    category_id = Column(String, index=True)
    month = Column(Integer)  # 0-11
    year = Column(Integer)
    amount = Column(Float)


class Transaction(Base):
    __tablename__ = "transactions"

    id = Column(String, primary_key=True, default=new_id)
    user_id = Column(String, index=True, nullable=False)
    description = Column(String)
    amount = Column(Float)
    date = Column(String, index=True)  # ISO: YYYY-MM-DD, a ordem do texto é a ordem cronológica
    category = Column(String, index=True)  # nome da categoria, não o id
    type = Column(Enum(TransactionType, native_enum=False))
    is_applied = Column(Boolean, default=False, nullable=False)
    ignore_in_budget = Column(Boolean, default=False, nullable=False)
    observations = Column(String(1000))
    account_id = Column(String, index=True)

    # Importação OFX
    fitid = Column(String)

    # Cartão de crédito: fatura no formato MM/YYYY
    invoice_month = Column(String)

    # Parcelamento
    batch_id = Column(String, index=True)
    installment_number = Column(Integer)
    total_installments = Column(Integer)

    # Transferência: a outra perna
    related_transaction_id = Column(String)

    split = relationship(
        "TransactionSplit",
        cascade="all, delete-orphan",
        order_by="TransactionSplit.id",
        lazy="selectin",
    )


class TransactionSplit(Base):
    __tablename__ = "transaction_splits"

    id = Column(Integer, primary_key=True, autoincrement=True)
    transaction_id = Column(String, ForeignKey("transactions.id", ondelete="CASCADE"), index=True, nullable=False)
    category_name = Column(String)
    amount = Column(Float)


class FinancialGoal(Base):
    __tablename__ = "financial_goals"

    id = Column(String, primary_key=True, default=new_id)
    user_id = Column(String, index=True, nullable=False)
    account_id = Column(String)
    target_amount = Column(Float)
    target_date = Column(String)  # YYYY-MM-DD


class WealthConfig(Base):
    __tablename__ = "wealth_configs"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(String, index=True, nullable=False)
    passive_income_goal = Column(Float, default=0.0)
