# backend/repositories.py
# Acesso ao banco, uma classe por entidade. Nada aqui faz commit: quem
# decide a transação é o serviço.
from sqlalchemy.orm import Session

from models import Account, Budget, Category, FinancialGoal, Transaction, WealthConfig


class Repository:
    model = None

    def __init__(self, db: Session):
        self.db = db

    def find_by_id(self, id):
        if id is None:
            return None
        return self.db.get(self.model, id)

    def find_all_by_id(self, ids):
        if not ids:
            return []
        return self.db.query(self.model).filter(self.model.id.in_(list(ids))).all()

    def find_all_by_user_id(self, user_id: str):
        return self.db.query(self.model).filter(self.model.user_id == user_id).all()

    def save(self, entity):
        # merge = insert ou update pela chave primária
        persisted = self.db.merge(entity)
        self.db.flush()
        return persisted

    def save_all(self, entities):
        persisted = [self.db.merge(e) for e in entities]
        self.db.flush()
        return persisted

    def delete(self, entity):
        self.db.delete(entity)
        self.db.flush()

    def delete_all(self, entities):
        for entity in entities:
            self.db.delete(entity)
        self.db.flush()


class AccountRepository(Repository):
    model = Account

    def find_default(self, user_id: str, type_):
        return (
            self.db.query(Account)
            .filter(Account.user_id == user_id, Account.type == type_, Account.is_default.is_(True))
            .first()
        )


class CategoryRepository(Repository):
    model = Category


class BudgetRepository(Repository):
    model = Budget

    def exists_by_category_id(self, category_id: str, user_id: str) -> bool:
        query = self.db.query(Budget).filter(Budget.category_id == category_id, Budget.user_id == user_id)
        return self.db.query(query.exists()).scalar()


class TransactionRepository(Repository):
    model = Transaction

    def find_all_by_date_between(self, user_id: str, start: str, end: str):
        return (
            self.db.query(Transaction)
            .filter(Transaction.user_id == user_id, Transaction.date.between(start, end))
            .order_by(Transaction.date)
            .all()
        )

    def exists_by_category(self, category_name: str, user_id: str) -> bool:
        query = self.db.query(Transaction).filter(
            Transaction.category == category_name, Transaction.user_id == user_id
        )
        return self.db.query(query.exists()).scalar()


class FinancialGoalRepository(Repository):
    model = FinancialGoal


class WealthConfigRepository(Repository):
    model = WealthConfig

    def find_by_user_id(self, user_id: str):
        return self.db.query(WealthConfig).filter(WealthConfig.user_id == user_id).first()
