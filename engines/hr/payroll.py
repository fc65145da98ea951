"""
FOS HR Engine — Payroll Estimates
===================================
gross_pay = hours_worked × hourly_rate, computed once and frozen into
the estimate. Later rate changes never touch stored estimates.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from core.commands.errors import UserNotFound
from core.context.actor_context import ActorContext
from core.primitives.payroll import PayrollEstimate
from core.primitives.user import User, UserRole
from core.state.snapshot import AppState
from engines.hr.commands import PayrollEstimateRequest


def estimate(
    state: AppState,
    request: PayrollEstimateRequest,
    estimate_id: str,
    now: datetime,
    generated_by: str,
) -> tuple[AppState, PayrollEstimate]:
    user = state.find_user(request.user_id)
    if user is None:
        raise UserNotFound(request.user_id)

    rate = user.effective_hourly_rate
    result = PayrollEstimate(
        estimate_id=estimate_id,
        user_id=user.user_id,
        warehouse_id=user.assigned_warehouse_id or "",
        start_date=request.start_date,
        end_date=request.end_date,
        hours_worked=request.hours_worked,
        hourly_rate=rate,
        gross_pay=request.hours_worked * rate,
        generated_at=now,
        generated_by=generated_by,
    )
    new_state = state.with_changes(
        payroll_estimates=(result,) + state.payroll_estimates,
    )
    return new_state, result


def eligible_workers(
    state: AppState,
    actor: Optional[ActorContext],
) -> tuple[User, ...]:
    """Users the actor may estimate payroll for."""
    if actor is None:
        return tuple()

    if actor.role == UserRole.OWNER:
        return tuple(
            u for u in state.users
            if u.role in (UserRole.WORKER, UserRole.WAREHOUSE_ADMIN)
        )

    if actor.role == UserRole.WAREHOUSE_ADMIN and actor.assigned_warehouse_id:
        return tuple(
            u for u in state.users
            if u.role == UserRole.WORKER
            and u.assigned_warehouse_id == actor.assigned_warehouse_id
        )

    return tuple()
