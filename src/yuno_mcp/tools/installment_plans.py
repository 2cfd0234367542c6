"""
Installment plan tools.

API Reference: https://docs.y.uno/reference/create-installments-plan
"""

from __future__ import annotations

from ..schemas.installment_plans import (
    InstallmentPlanCreate,
    InstallmentPlanRef,
    InstallmentPlanRetrieveAll,
    InstallmentPlanUpdate,
)
from .base import api_tool, without

installment_plan_create = api_tool(
    "installmentPlanCreate",
    "Create an installment plan in Yuno.",
    InstallmentPlanCreate,
    lambda client, p: client.installment_plans.create(p),
    account_field="account_id",
    account_as_list=True,
)

installment_plan_retrieve = api_tool(
    "installmentPlanRetrieve",
    "Retrieve an installment plan in Yuno by its ID.",
    InstallmentPlanRef,
    lambda client, p: client.installment_plans.retrieve(p["planId"]),
)

installment_plan_retrieve_all = api_tool(
    "installmentPlanRetrieveAll",
    "Retrieve all installment plans in Yuno for an account.",
    InstallmentPlanRetrieveAll,
    lambda client, p: client.installment_plans.retrieve_all(p["accountId"]),
)

installment_plan_update = api_tool(
    "installmentPlanUpdate",
    "Update an installment plan in Yuno by its ID.",
    InstallmentPlanUpdate,
    lambda client, p: client.installment_plans.update(p["planId"], without(p, "planId")),
)

installment_plan_delete = api_tool(
    "installmentPlanDelete",
    "Delete an installment plan in Yuno by its ID.",
    InstallmentPlanRef,
    lambda client, p: client.installment_plans.delete(p["planId"]),
)

INSTALLMENT_PLAN_TOOLS = [
    installment_plan_create,
    installment_plan_retrieve,
    installment_plan_retrieve_all,
    installment_plan_update,
    installment_plan_delete,
]
