"""
FOS HR Engine — User Directory
================================
Staff records: add, update, delete.

RULES:
- The OWNER account is never deleted and its role never changes
- User ids are unique
- employee_number defaults to Y + zero-padded sequence
"""

from __future__ import annotations

from core.commands.errors import DuplicateUser, OwnerProtected, UserNotFound
from core.primitives.user import User, UserRole
from core.state.snapshot import AppState, replace_entry
from engines.hr.commands import (
    AddUserRequest,
    DeleteUserRequest,
    UpdateUserRequest,
)


def next_employee_number(state: AppState) -> str:
    return f"Y{len(state.users) + 1:05d}"


def add_user(
    state: AppState,
    request: AddUserRequest,
    user_id: str,
) -> tuple[AppState, User]:
    if state.find_user(user_id) is not None:
        raise DuplicateUser(user_id)

    if request.role == UserRole.OWNER:
        raise OwnerProtected("Only one owner account may exist.")

    user = User(
        user_id=user_id,
        employee_number=request.employee_number or next_employee_number(state),
        full_name=request.full_name,
        email=request.email,
        role=request.role,
        assigned_warehouse_id=request.assigned_warehouse_id,
        hourly_rate=request.hourly_rate,
    )
    return state.with_changes(users=state.users + (user,)), user


def update_user(
    state: AppState,
    request: UpdateUserRequest,
) -> tuple[AppState, User]:
    existing = state.find_user(request.user_id)
    if existing is None:
        raise UserNotFound(request.user_id)

    if existing.is_owner and request.role != existing.role:
        raise OwnerProtected("The owner account cannot be demoted.")

    if not existing.is_owner and request.role == UserRole.OWNER:
        raise OwnerProtected("Users cannot be promoted to owner.")

    updated = User(
        user_id=existing.user_id,
        employee_number=request.employee_number or existing.employee_number,
        full_name=request.full_name,
        email=request.email,
        role=request.role,
        assigned_warehouse_id=request.assigned_warehouse_id,
        hourly_rate=request.hourly_rate,
    )
    users = replace_entry(
        state.users, lambda u: u.user_id == request.user_id, updated,
    )
    return state.with_changes(users=users), updated


def delete_user(
    state: AppState,
    request: DeleteUserRequest,
) -> tuple[AppState, User]:
    existing = state.find_user(request.user_id)
    if existing is None:
        raise UserNotFound(request.user_id)
    if existing.is_owner:
        raise OwnerProtected()

    users = tuple(u for u in state.users if u.user_id != request.user_id)
    return state.with_changes(users=users), existing
