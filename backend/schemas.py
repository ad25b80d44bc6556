# backend/schemas.py
# Formato JSON trocado com o front (camelCase). O mesmo schema serve para
# entrada e saída, como o front envia o objeto inteiro.
from typing import ClassVar, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

import models
from models import AccountType, CategorySubtype, TransactionType


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    orm_model: ClassVar[type] = None

    def to_model(self):
        return self.orm_model(**self.model_dump())


class AccountSchema(CamelModel):
    orm_model: ClassVar[type] = models.Account

    id: Optional[str] = None
    user_id: Optional[str] = None
    name: str
    type: AccountType
    initial_balance: Optional[float] = None
    closing_day: Optional[int] = Field(default=None, ge=1, le=31)
    due_day: Optional[int] = Field(default=None, ge=1, le=31)
    is_default: bool = False


class CategorySchema(CamelModel):
    orm_model: ClassVar[type] = models.Category

    id: Optional[str] = None
    user_id: Optional[str] = None
    name: str
    type: TransactionType
    subtype: Optional[CategorySubtype] = None
    impacts_budget: bool = False
    icon: Optional[str] = None


class BudgetSchema(CamelModel):
    orm_model: ClassVar[type] = models.Budget

    id: Optional[str] = None
    user_id: Optional[str] = None
    category_id: str
    month: int = Field(ge=0, le=11)
    year: int
    amount: float


class TransactionSplitSchema(CamelModel):
    category_name: str
    amount: float


class TransactionSchema(CamelModel):
    orm_model: ClassVar[type] = models.Transaction

    id: Optional[str] = None
    user_id: Optional[str] = None
    description: str = ""
    amount: float
    date: str
    category: Optional[str] = None
    type: TransactionType
    is_applied: bool = False
    ignore_in_budget: bool = False
    observations: Optional[str] = Field(default=None, max_length=1000)
    account_id: Optional[str] = None
    fitid: Optional[str] = None
    split: list[TransactionSplitSchema] = Field(default_factory=list)
    invoice_month: Optional[str] = None
    batch_id: Optional[str] = None
    installment_number: Optional[int] = None
    total_installments: Optional[int] = None
    related_transaction_id: Optional[str] = None

    def to_model(self):
        fields = self.model_dump(exclude={"split"})
        split = [models.TransactionSplit(category_name=s.category_name, amount=s.amount) for s in self.split]
        return models.Transaction(**fields, split=split)


class FinancialGoalSchema(CamelModel):
    orm_model: ClassVar[type] = models.FinancialGoal

    id: Optional[str] = None
    user_id: Optional[str] = None
    account_id: str
    target_amount: float
    target_date: str


class WealthConfigSchema(CamelModel):
    orm_model: ClassVar[type] = models.WealthConfig

    id: Optional[int] = None
    user_id: Optional[str] = None
    passive_income_goal: float = 0.0


class BackupSchema(CamelModel):
    version: int
    timestamp: str
    transactions: list[TransactionSchema]
    accounts: list[AccountSchema]
    categories: list[CategorySchema]
    budgets: list[BudgetSchema]
    goals: list[FinancialGoalSchema]
    wealth_config: WealthConfigSchema


class StatusSchema(BaseModel):
    status: str
