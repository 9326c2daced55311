"""
Expense and supply routes.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, Response

from recordbook.auth import Claims, get_claims
from recordbook.dependencies import get_repositories
from recordbook.records import Expense, Supply
from recordbook.repositories import Repositories
from recordbook.schemas import (
    ExpensePayload,
    ExpenseResponse,
    ExpensesResponse,
    SuppliesResponse,
    SupplyPayload,
    SupplyResponse,
)

router = APIRouter()


@router.get("/expense", response_model=ExpensesResponse, tags=["Expense"])
def get_expenses(
    project_id: str = Query(..., alias="projectID", min_length=1),
    claims: Claims = Depends(get_claims),
    repos: Repositories = Depends(get_repositories),
):
    return ExpensesResponse(
        expenses=repos.expenses.list(claims.id, project_id=project_id)
    )


@router.get("/expense/{expense_id}", response_model=ExpenseResponse, tags=["Expense"])
def get_expense(
    expense_id: str,
    claims: Claims = Depends(get_claims),
    repos: Repositories = Depends(get_repositories),
):
    return ExpenseResponse(expense=repos.expenses.get(claims.id, expense_id))


@router.post("/expense", response_model=ExpenseResponse, status_code=201, tags=["Expense"])
def add_expense(
    payload: ExpensePayload,
    claims: Claims = Depends(get_claims),
    repos: Repositories = Depends(get_repositories),
):
    expense = Expense.create(claims.id, **payload.model_dump())
    return ExpenseResponse(expense=repos.expenses.upsert(expense))


@router.put("/expense/{expense_id}", status_code=204, tags=["Expense"])
def update_expense(
    expense_id: str,
    payload: ExpensePayload,
    claims: Claims = Depends(get_claims),
    repos: Repositories = Depends(get_repositories),
):
    expense = repos.expenses.get(claims.id, expense_id)
    repos.expenses.upsert(expense.revise(**payload.model_dump()))
    return Response(status_code=204)


@router.delete("/expense/{expense_id}", status_code=204, tags=["Expense"])
def delete_expense(
    expense_id: str,
    claims: Claims = Depends(get_claims),
    repos: Repositories = Depends(get_repositories),
):
    repos.expenses.delete(claims.id, expense_id)
    return Response(status_code=204)


@router.get("/supply", response_model=SuppliesResponse, tags=["Supply"])
def get_supplies(
    project_id: str = Query(..., alias="projectID", min_length=1),
    claims: Claims = Depends(get_claims),
    repos: Repositories = Depends(get_repositories),
):
    return SuppliesResponse(
        supplies=repos.supplies.list(claims.id, project_id=project_id)
    )


@router.get("/supply/{supply_id}", response_model=SupplyResponse, tags=["Supply"])
def get_supply(
    supply_id: str,
    claims: Claims = Depends(get_claims),
    repos: Repositories = Depends(get_repositories),
):
    return SupplyResponse(supply=repos.supplies.get(claims.id, supply_id))


@router.post("/supply", response_model=SupplyResponse, status_code=201, tags=["Supply"])
def add_supply(
    payload: SupplyPayload,
    claims: Claims = Depends(get_claims),
    repos: Repositories = Depends(get_repositories),
):
    supply = Supply.create(claims.id, **payload.model_dump())
    return SupplyResponse(supply=repos.supplies.upsert(supply))


@router.put("/supply/{supply_id}", status_code=204, tags=["Supply"])
def update_supply(
    supply_id: str,
    payload: SupplyPayload,
    claims: Claims = Depends(get_claims),
    repos: Repositories = Depends(get_repositories),
):
    supply = repos.supplies.get(claims.id, supply_id)
    repos.supplies.upsert(supply.revise(**payload.model_dump()))
    return Response(status_code=204)


@router.delete("/supply/{supply_id}", status_code=204, tags=["Supply"])
def delete_supply(
    supply_id: str,
    claims: Claims = Depends(get_claims),
    repos: Repositories = Depends(get_repositories),
):
    repos.supplies.delete(claims.id, supply_id)
    return Response(status_code=204)
