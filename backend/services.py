# backend/services.py
# Regras de negócio por entidade. O usuário que age chega explícito em cada
# chamada; registro de outro usuário é tratado como inexistente.
from datetime import datetime, timezone

import structlog
from sqlalchemy.orm import Session

from database import unit_of_work
from errors import CategoryInUseError
from models import WealthConfig, new_id
from repositories import (
    AccountRepository,
    BudgetRepository,
    CategoryRepository,
    FinancialGoalRepository,
    TransactionRepository,
    WealthConfigRepository,
)

logger = structlog.get_logger()


class UserScopedService:
    """find_all / find_by_id / save / save_all / delete_by_id filtrados por user_id."""

    repository_class = None

    def __init__(self, db: Session):
        self.db = db
        self.repository = self.repository_class(db)

    def find_all(self, user_id: str):
        return self.repository.find_all_by_user_id(user_id)

    def find_by_id(self, user_id: str, id: str):
        entity = self.repository.find_by_id(id)
        if entity is None or entity.user_id != user_id:
            return None
        return entity

    def save(self, user_id: str, entity):
        with unit_of_work(self.db):
            saved = self._save(user_id, entity)
        return saved

    def save_all(self, user_id: str, entities: list):
        with unit_of_work(self.db):
            saved = self.repository.save_all([self._claim(user_id, e) for e in entities])
        return saved

    def delete_by_id(self, user_id: str, id: str) -> bool:
        entity = self.find_by_id(user_id, id)
        if entity is None:
            return False
        with unit_of_work(self.db):
            self.remove(user_id, entity)
        return True

    def _claim(self, user_id: str, entity):
        # Um id de outro usuário nunca é sobrescrito: vira um registro novo
        if entity.id is not None:
            existing = self.repository.find_by_id(entity.id)
            if existing is not None and existing.user_id != user_id:
                entity.id = None
        if entity.id is None:
            entity.id = new_id()
        entity.user_id = user_id
        return entity

    def _save(self, user_id: str, entity):
        return self.repository.save(self._claim(user_id, entity))

    def remove(self, user_id: str, entity):
        self.repository.delete(entity)


class AccountService(UserScopedService):
    repository_class = AccountRepository

    def _save(self, user_id: str, account):
        account = self._claim(user_id, account)
        if account.is_default:
            # Leitura seguida de escrita: dois pedidos simultâneos podem deixar
            # duas contas padrão do mesmo tipo.
            current = self.repository.find_default(user_id, account.type)
            if current is not None and current.id != account.id:
                current.is_default = False
                self.repository.save(current)
                logger.info("default_account_replaced", user_id=user_id, previous=current.id, current=account.id)
        return self.repository.save(account)


class BudgetService(UserScopedService):
    repository_class = BudgetRepository


class FinancialGoalService(UserScopedService):
    repository_class = FinancialGoalRepository


class CategoryService(UserScopedService):
    repository_class = CategoryRepository

    def __init__(self, db: Session):
        super().__init__(db)
        self.transactions = TransactionRepository(db)
        self.budgets = BudgetRepository(db)

    def remove(self, user_id: str, category):
        if self.transactions.exists_by_category(category.name, user_id):
            logger.info("category_delete_rejected", user_id=user_id, category_id=category.id, reason="transactions")
            raise CategoryInUseError("Cannot delete category used in transactions")
        if self.budgets.exists_by_category_id(category.id, user_id):
            logger.info("category_delete_rejected", user_id=user_id, category_id=category.id, reason="budgets")
            raise CategoryInUseError("Cannot delete category used in budgets")
        self.repository.delete(category)


class TransactionService(UserScopedService):
    repository_class = TransactionRepository

    def find_by_date_range(self, user_id: str, start: str, end: str):
        # Datas ISO 8601: comparar texto é comparar datas
        return self.repository.find_all_by_date_between(user_id, start, end)

    def delete_batch(self, user_id: str, ids: list) -> int:
        found = self.repository.find_all_by_id(ids)
        owned = [t for t in found if t.user_id == user_id]
        with unit_of_work(self.db):
            self.repository.delete_all(owned)
        logger.info("transactions_batch_deleted", user_id=user_id, requested=len(ids), deleted=len(owned))
        return len(owned)


class WealthConfigService:
    def __init__(self, db: Session):
        self.db = db
        self.repository = WealthConfigRepository(db)

    def get(self, user_id: str) -> WealthConfig:
        config = self.repository.find_by_user_id(user_id)
        if config is None:
            # Valor padrão só para leitura, não é gravado
            return WealthConfig(id=None, user_id=user_id, passive_income_goal=0.0)
        return config

    def save(self, user_id: str, config: WealthConfig) -> WealthConfig:
        with unit_of_work(self.db):
            existing = self.repository.find_by_user_id(user_id)
            # Sem existing o id do cliente é descartado: sempre insert novo
            config.id = existing.id if existing is not None else None
            config.user_id = user_id
            saved = self.repository.save(config)
        return saved


class DataService:
    """Operações sobre todos os dados de um usuário."""

    BACKUP_VERSION = 1

    def __init__(self, db: Session):
        self.db = db
        self.transactions = TransactionRepository(db)
        self.budgets = BudgetRepository(db)
        self.goals = FinancialGoalRepository(db)
        self.categories = CategoryService(db)
        self.accounts = AccountRepository(db)
        self.wealth_configs = WealthConfigRepository(db)

    def reset_user_data(self, user_id: str) -> None:
        # A ordem importa: transações e orçamentos saem antes das categorias,
        # senão a trava de categoria em uso recusa a exclusão.
        with unit_of_work(self.db):
            self.transactions.delete_all(self.transactions.find_all_by_user_id(user_id))
            self.budgets.delete_all(self.budgets.find_all_by_user_id(user_id))
            self.goals.delete_all(self.goals.find_all_by_user_id(user_id))
            for category in self.categories.find_all(user_id):
                self.categories.remove(user_id, category)
            self.accounts.delete_all(self.accounts.find_all_by_user_id(user_id))
            self.wealth_configs.delete_all(self.wealth_configs.find_all_by_user_id(user_id))
        logger.info("user_data_reset", user_id=user_id)

    def export_user_data(self, user_id: str) -> dict:
        return {
            "version": self.BACKUP_VERSION,
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "transactions": self.transactions.find_all_by_user_id(user_id),
            "accounts": self.accounts.find_all_by_user_id(user_id),
            "categories": self.categories.find_all(user_id),
            "budgets": self.budgets.find_all_by_user_id(user_id),
            "goals": self.goals.find_all_by_user_id(user_id),
            "wealth_config": WealthConfigService(self.db).get(user_id),
        }
