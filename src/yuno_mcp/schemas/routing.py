"""Routing workflow models for the dashboard API."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import EmailStr, Field

from .shared import YunoModel


class RoutingLogin(YunoModel):
    username: EmailStr = Field(description="Dashboard login email")
    password: str = Field(min_length=1)


class RoutingCreate(YunoModel):
    name: str = Field(min_length=1, max_length=255, description="Name of the routing workflow")
    payment_method: str = Field(min_length=1, max_length=255, description="Payment method type")
    username: EmailStr | None = Field(
        default=None, description="Dashboard login email; logs in first when given"
    )
    password: str | None = Field(default=None, min_length=1)


class RoutingGetProviders(YunoModel):
    paymentMethod: str = Field(min_length=1, description="Payment method to list connections for")


class RoutingVersionRef(YunoModel):
    versionCode: str = Field(min_length=1, description="Code (UUID) of the workflow version")


class RoutingLogOut(YunoModel):
    pass


class ConditionDetail(YunoModel):
    name: str
    description: str
    criteria: str
    operators: list[str]
    payment_methods: list[str]
    value_source: str
    icon: str


class Condition(YunoModel):
    condition_set_id: int
    condition_type: str
    values: list[Any]
    conditional: str
    complex_name: str | None = None
    complex_index: str | None = None
    additional_field_name: str | None = None
    detail: ConditionDetail
    visible: bool
    metadata_key: str | None = None
    time_period_repeat_amount: int | None = None
    time_period_repetition_days: int | None = None
    time_period_repeat_frequency: str | None = None
    time_period_start_time: str | None = None
    time_period_end_time: str | None = None


class RouteOutput(YunoModel):
    output: Literal["SUCCEEDED", "DECLINED", "ERROR"]
    order: int
    type: Literal["SUCCESS", "WARNING", "ERROR"]
    has_split: bool
    decline_types: list[str]
    next_route_index: int | None = None
    next_route_indexes: list[int]
    id: str | None = None


class RouteData(YunoModel):
    action: str | None = None
    provider_id: str
    integration_code: str
    provider_type: Literal["PAYMENT", "PROCESSOR"]


class Route(YunoModel):
    type: Literal["PROVIDER", "CONDITION"]
    outputs: list[RouteOutput]
    index: int
    updated_at: str
    repair: bool
    data: RouteData


class StartConfig(YunoModel):
    index: int
    percentage: float


class ConditionSet(YunoModel):
    editable: bool
    sort_number: int
    conditions: list[Condition]
    routes: list[Route]
    start: list[StartConfig]
    updated_at: str
    category: str
    expired: bool
    threshold_code: str | None = None
    monitor_active: bool | None = None
    id: int
    name: str | None = None
    description: str | None = None
    smart_routing_mode: str | None = None


class Workflow(YunoModel):
    id: int
    code: str
    name: str
    status: str
    account_code: str
    created_at: str
    updated_at: str
    payment_method_type: str
    is_active: bool


class WorkflowVersion(YunoModel):
    id: int
    workflow_id: int
    code: str = Field(description="Version code (UUID)")
    status: str
    number: int
    created_at: str
    updated_at: str
    published_at: str | None = None
    name: str
    publishable: bool
    favorite: bool
    repair: bool
    updated_by: str
    payment_enabled: bool
    fraud_enabled: bool
    paused: bool
    deleted_at: str | None = None


class RoutingIntegration(YunoModel):
    integration_code: str | None = None
    type: str | None = None
    provider_id: str | None = None
    icon: str | None = None
    name: str | None = None
    description: str | None = None
    active: bool | None = None
    connection_name: str | None = None
    provider_icon: str | None = None
    category: str | None = None
    created_at: str | None = None
    updated_at: str | None = None
    provider_name: str | None = None
    connection_state: str | None = None
    flow_type: str | None = None
    costs: list[Any] | None = None


class RoutingProviders(YunoModel):
    integrations: list[RoutingIntegration] | None = None


class UpdateRoute(YunoModel):
    workflow: Workflow
    version: WorkflowVersion
    condition_sets: list[ConditionSet]


class RoutingUpdate(YunoModel):
    updateRoute: UpdateRoute = Field(description="Workflow, version and condition sets to save")
    provider_connection_code: str = Field(description="Connection code for the routing workflow")
    providers: RoutingProviders
