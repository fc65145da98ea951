"""
FOS HR Engine — User Directory Tests
"""

from __future__ import annotations

from decimal import Decimal

import pytest

from core.commands.errors import DuplicateUser, OwnerProtected, UserNotFound
from core.primitives.user import UserRole
from core.state.seed import build_seed_state
from engines.hr.commands import AddUserRequest, DeleteUserRequest, UpdateUserRequest
from engines.hr.directory import add_user, delete_user, next_employee_number, update_user


def _add(**overrides):
    fields = dict(
        full_name="Almaz Bekele",
        email="almaz@anuinv.com",
        role=UserRole.WORKER,
        assigned_warehouse_id="w2",
        hourly_rate=Decimal("55"),
    )
    fields.update(overrides)
    return AddUserRequest(**fields)


def _update(user_id="u3", role=UserRole.WORKER, **overrides):
    fields = dict(
        user_id=user_id,
        full_name="John Worker",
        email="yee1@anuinv.com",
        role=role,
        assigned_warehouse_id="w1",
        hourly_rate=Decimal("70"),
    )
    fields.update(overrides)
    return UpdateUserRequest(**fields)


class TestAddUser:
    def test_generates_employee_number(self):
        state = build_seed_state()
        assert next_employee_number(state) == "Y00005"
        new_state, user = add_user(state, _add(), "u5")
        assert user.employee_number == "Y00005"
        assert new_state.users[-1] == user

    def test_explicit_employee_number_kept(self):
        _, user = add_user(build_seed_state(), _add(employee_number="Y09999"), "u5")
        assert user.employee_number == "Y09999"

    def test_duplicate_id(self):
        with pytest.raises(DuplicateUser):
            add_user(build_seed_state(), _add(), "u2")

    def test_blank_name_rejected(self):
        with pytest.raises(ValueError, match="full_name"):
            _add(full_name=" ")

    def test_negative_rate_rejected(self):
        with pytest.raises(ValueError, match="hourly_rate"):
            _add(hourly_rate=Decimal("-1"))

    def test_second_owner_rejected(self):
        state = build_seed_state()
        with pytest.raises(OwnerProtected, match="one owner"):
            add_user(state, _add(role=UserRole.OWNER, assigned_warehouse_id=None), "u5")


class TestUpdateUser:
    def test_replaces_fields(self):
        state, user = update_user(build_seed_state(), _update())
        assert user.hourly_rate == Decimal("70")
        assert user.employee_number == "Y00003"
        assert state.find_user("u3") == user

    def test_unknown_user(self):
        with pytest.raises(UserNotFound):
            update_user(build_seed_state(), _update(user_id="u9"))

    def test_owner_cannot_be_demoted(self):
        with pytest.raises(OwnerProtected, match="demoted"):
            update_user(
                build_seed_state(),
                _update(user_id="u1", role=UserRole.WAREHOUSE_ADMIN,
                        full_name="Abdellah Teshome", assigned_warehouse_id=None),
            )

    def test_owner_details_can_change(self):
        state, user = update_user(
            build_seed_state(),
            _update(user_id="u1", role=UserRole.OWNER,
                    full_name="Abdellah T.", assigned_warehouse_id=None),
        )
        assert user.full_name == "Abdellah T."
        assert user.role == UserRole.OWNER

    def test_promotion_to_owner_rejected(self):
        state = build_seed_state()
        with pytest.raises(OwnerProtected, match="promoted"):
            update_user(state, _update(role=UserRole.OWNER, assigned_warehouse_id=None))
        assert state.find_user("u3").role == UserRole.WORKER


class TestDeleteUser:
    def test_removes_user(self):
        state, removed = delete_user(build_seed_state(), DeleteUserRequest(user_id="u4"))
        assert removed.user_id == "u4"
        assert state.find_user("u4") is None
        assert len(state.users) == 3

    def test_owner_protected(self):
        with pytest.raises(OwnerProtected):
            delete_user(build_seed_state(), DeleteUserRequest(user_id="u1"))

    def test_unknown_user(self):
        with pytest.raises(UserNotFound):
            delete_user(build_seed_state(), DeleteUserRequest(user_id="u9"))
