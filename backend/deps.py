# backend/deps.py
from typing import Optional

from fastapi import Depends, Header
from sqlalchemy.orm import Session

from config import get_settings
from database import get_db
from services import (
    AccountService,
    BudgetService,
    CategoryService,
    DataService,
    FinancialGoalService,
    TransactionService,
    WealthConfigService,
)


def get_current_user_id(x_user_id: Optional[str] = Header(default=None)) -> str:
    """Usuário que age no pedido.

    Vem do cabeçalho X-User-Id, preenchido pela camada que autentica. Sem
    cabeçalho vale o DEFAULT_USER_ID (instalação de um usuário só).
    """
    if x_user_id and x_user_id.strip():
        return x_user_id.strip()
    return get_settings().default_user_id


def get_account_service(db: Session = Depends(get_db)) -> AccountService:
    return AccountService(db)


def get_budget_service(db: Session = Depends(get_db)) -> BudgetService:
    return BudgetService(db)


def get_category_service(db: Session = Depends(get_db)) -> CategoryService:
    return CategoryService(db)


def get_goal_service(db: Session = Depends(get_db)) -> FinancialGoalService:
    return FinancialGoalService(db)


def get_transaction_service(db: Session = Depends(get_db)) -> TransactionService:
    return TransactionService(db)


def get_wealth_config_service(db: Session = Depends(get_db)) -> WealthConfigService:
    return WealthConfigService(db)


def get_data_service(db: Session = Depends(get_db)) -> DataService:
    return DataService(db)
