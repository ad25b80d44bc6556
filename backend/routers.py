# backend/routers.py
# Rotas REST. Só traduzem HTTP <-> serviço; regra de negócio fica em services.py.
from typing import Optional

from fastapi import APIRouter, Body, Depends, HTTPException, Query

from deps import (
    get_account_service,
    get_budget_service,
    get_category_service,
    get_current_user_id,
    get_data_service,
    get_goal_service,
    get_transaction_service,
    get_wealth_config_service,
)
from errors import NotFoundError
from schemas import (
    AccountSchema,
    BackupSchema,
    BudgetSchema,
    CategorySchema,
    FinancialGoalSchema,
    StatusSchema,
    TransactionSchema,
    WealthConfigSchema,
)
from services import DataService, TransactionService, WealthConfigService


def add_crud_routes(router: APIRouter, label: str, schema, get_service, batch: bool = True, listing: bool = True) -> APIRouter:
    """Listar, criar, atualizar e excluir registros do usuário que age."""
    if listing:
        @router.get("", response_model=list[schema])
        def list_all(user_id: str = Depends(get_current_user_id), service=Depends(get_service)):
            return service.find_all(user_id)

    @router.post("", response_model=schema)
    def create(body: schema, user_id: str = Depends(get_current_user_id), service=Depends(get_service)):
        return service.save(user_id, body.to_model())

    if batch:
        @router.post("/batch", response_model=list[schema])
        def create_batch(body: list[schema], user_id: str = Depends(get_current_user_id), service=Depends(get_service)):
            return service.save_all(user_id, [item.to_model() for item in body])

    @router.put("/{id}", response_model=schema)
    def update(id: str, body: schema, user_id: str = Depends(get_current_user_id), service=Depends(get_service)):
        if service.find_by_id(user_id, id) is None:
            raise NotFoundError(f"{label} {id} not found")
        entity = body.to_model()
        entity.id = id  # o id do caminho vale mais que o do corpo
        return service.save(user_id, entity)

    @router.delete("/{id}", response_model=StatusSchema)
    def delete(id: str, user_id: str = Depends(get_current_user_id), service=Depends(get_service)):
        # Exclusão idempotente: ausente ou de outro usuário também responde ok
        service.delete_by_id(user_id, id)
        return {"status": "deleted"}

    return router


def crud_router(prefix: str, label: str, schema, get_service, batch: bool = True) -> APIRouter:
    return add_crud_routes(APIRouter(prefix=prefix, tags=[label]), label, schema, get_service, batch=batch)


accounts_router = crud_router("/accounts", "accounts", AccountSchema, get_account_service)
categories_router = crud_router("/categories", "categories", CategorySchema, get_category_service)
budgets_router = crud_router("/budgets", "budgets", BudgetSchema, get_budget_service)
goals_router = crud_router("/goals", "goals", FinancialGoalSchema, get_goal_service, batch=False)


# --- Transações: rotas extras antes das genéricas, /batch não pode cair em /{id} ---
transactions_router = APIRouter(prefix="/transactions", tags=["transactions"])


@transactions_router.get("", response_model=list[TransactionSchema])
def list_transactions(
    start_date: Optional[str] = Query(default=None, alias="startDate"),
    end_date: Optional[str] = Query(default=None, alias="endDate"),
    user_id: str = Depends(get_current_user_id),
    service: TransactionService = Depends(get_transaction_service),
):
    if start_date is None and end_date is None:
        return service.find_all(user_id)
    if start_date is None or end_date is None:
        raise HTTPException(status_code=400, detail="startDate and endDate must be given together")
    return service.find_by_date_range(user_id, start_date, end_date)


@transactions_router.put("/batch", response_model=list[TransactionSchema])
def update_transactions(
    body: list[TransactionSchema],
    user_id: str = Depends(get_current_user_id),
    service: TransactionService = Depends(get_transaction_service),
):
    return service.save_all(user_id, [item.to_model() for item in body])


@transactions_router.post("/delete-batch", response_model=StatusSchema)
def delete_transactions(
    ids: list[str] = Body(...),
    user_id: str = Depends(get_current_user_id),
    service: TransactionService = Depends(get_transaction_service),
):
    service.delete_batch(user_id, ids)
    return {"status": "deleted"}


@transactions_router.get("/{id}", response_model=TransactionSchema)
def get_transaction(
    id: str,
    user_id: str = Depends(get_current_user_id),
    service: TransactionService = Depends(get_transaction_service),
):
    transaction = service.find_by_id(user_id, id)
    if transaction is None:
        raise NotFoundError(f"transaction {id} not found")
    return transaction


add_crud_routes(transactions_router, "transactions", TransactionSchema, get_transaction_service, listing=False)


# --- Config de patrimônio: um registro por usuário ---
wealth_config_router = APIRouter(prefix="/wealth-config", tags=["wealth-config"])


@wealth_config_router.get("", response_model=WealthConfigSchema)
def get_wealth_config(
    user_id: str = Depends(get_current_user_id),
    service: WealthConfigService = Depends(get_wealth_config_service),
):
    return service.get(user_id)


@wealth_config_router.post("", response_model=WealthConfigSchema)
def save_wealth_config(
    body: WealthConfigSchema,
    user_id: str = Depends(get_current_user_id),
    service: WealthConfigService = Depends(get_wealth_config_service),
):
    return service.save(user_id, body.to_model())


# --- Dados do usuário como um todo ---
data_router = APIRouter(prefix="/data", tags=["data"])


@data_router.delete("/reset", response_model=StatusSchema)
def reset_data(
    user_id: str = Depends(get_current_user_id),
    service: DataService = Depends(get_data_service),
):
    service.reset_user_data(user_id)
    return {"status": "reset"}


@data_router.get("/export", response_model=BackupSchema)
def export_data(
    user_id: str = Depends(get_current_user_id),
    service: DataService = Depends(get_data_service),
):
    return service.export_user_data(user_id)


all_routers = [
    accounts_router,
    budgets_router,
    categories_router,
    goals_router,
    transactions_router,
    wealth_config_router,
    data_router,
]
