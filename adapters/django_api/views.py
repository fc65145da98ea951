"""
FOS Django Adapter Views
========================
Pass-through HTTP views over the ApplicationStateStore.

Every response uses the {"ok": ..., "data"|"error": ...} envelope.
Rejections carry the HTTP status mapped from their ErrorKind.
"""

from __future__ import annotations

import json
from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Any, Callable

from django.http import HttpRequest, JsonResponse
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_GET, require_POST

from adapters.django_api.wiring import build_store
from core.commands.bus import CommandResult
from core.commands.errors import DomainError
from core.http_api.errors import (
    error_response,
    rejection_response,
    status_for_kind,
    success_response,
)
from core.permissions.constants import ResourceKind
from core.primitives.attendance import Shift
from core.primitives.inventory import InventoryType
from core.primitives.invoice import PaymentMethod
from core.primitives.party import CustomerType
from core.primitives.user import UserRole
from core.primitives.warehouse import WarehouseStatus


def _json_error(code: str, message: str, status: int = 400) -> JsonResponse:
    return JsonResponse(
        error_response(code=code, message=message, details={}),
        status=status,
    )


def _parse_json_body(request: HttpRequest) -> dict[str, Any]:
    if not request.body:
        return {}
    try:
        parsed = json.loads(request.body.decode("utf-8"))
    except Exception as exc:
        raise ValueError("Request body must be valid JSON.") from exc
    if not isinstance(parsed, dict):
        raise ValueError("Request body must be a JSON object.")
    return parsed


# ══════════════════════════════════════════════════════════════
# FIELD COERCION
# ══════════════════════════════════════════════════════════════

def _enum(enum_cls) -> Callable[[Any], Any]:
    def parse(value: Any):
        try:
            return enum_cls(value)
        except ValueError as exc:
            allowed = ", ".join(member.value for member in enum_cls)
            raise ValueError(f"'{value}' is not one of: {allowed}.") from exc
    return parse


def _decimal(value: Any) -> Decimal:
    try:
        return Decimal(str(value))
    except InvalidOperation as exc:
        raise ValueError(f"'{value}' is not a valid amount.") from exc


def _date(value: Any) -> date:
    return date.fromisoformat(str(value))


def _int(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"'{value}' must be an integer.")
    return value


def _optional(parse: Callable[[Any], Any]) -> Callable[[Any], Any]:
    def wrapped(value: Any):
        if value is None or value == "":
            return None
        return parse(value)
    return wrapped


_WAREHOUSE_FIELDS = {
    "warehouse_id": str, "name": str, "location": str,
    "status": _enum(WarehouseStatus), "worker_count": _int,
}
_ITEM_FIELDS = {
    "item_id": str, "warehouse_id": str, "item_name": str,
    "quantity": _int, "unit": str, "item_type": _enum(InventoryType),
}
_CUSTOMER_FIELDS = {
    "customer_id": str, "name": str, "customer_type": _enum(CustomerType),
    "contact_person": str, "email": str, "phone": str,
}
_USER_FIELDS = {
    "user_id": str, "full_name": str, "email": str, "role": _enum(UserRole),
    "assigned_warehouse_id": _optional(str),
    "hourly_rate": _optional(_decimal),
    "employee_number": _optional(str),
}


def _coerce(body: dict[str, Any], parsers: dict[str, Callable[[Any], Any]]) -> dict[str, Any]:
    unknown = sorted(set(body) - set(parsers))
    if unknown:
        raise ValueError(f"Unknown fields: {unknown}")
    return {name: parsers[name](value) for name, value in body.items()}


# ══════════════════════════════════════════════════════════════
# RESPONSE HELPERS
# ══════════════════════════════════════════════════════════════

def _serialize(value: Any) -> Any:
    if value is None:
        return None
    if hasattr(value, "to_dict"):
        return value.to_dict()
    return value


def _result_response(result: CommandResult) -> JsonResponse:
    if result.is_rejected:
        return JsonResponse(
            rejection_response(result.reason),
            status=status_for_kind(result.reason.kind),
        )
    return JsonResponse(success_response(_serialize(result.value)))


def _dispatch_write(operation: Callable[..., CommandResult], parsers, request: HttpRequest):
    try:
        fields = _coerce(_parse_json_body(request), parsers)
        result = operation(**fields)
    except (ValueError, TypeError) as exc:
        return _json_error("INVALID_REQUEST", str(exc), status=400)
    return _result_response(result)


# ══════════════════════════════════════════════════════════════
# SESSION
# ══════════════════════════════════════════════════════════════

@csrf_exempt
@require_POST
def session_login_view(request: HttpRequest):
    try:
        body = _parse_json_body(request)
        role = _enum(UserRole)(body.get("role"))
    except ValueError as exc:
        return _json_error("INVALID_REQUEST", str(exc), status=400)

    try:
        user = build_store().login(role)
    except DomainError as exc:
        return _json_error(exc.code, str(exc), status=status_for_kind(exc.kind))
    return JsonResponse(success_response(user.to_dict()))


@csrf_exempt
@require_POST
def session_logout_view(request: HttpRequest):
    build_store().logout()
    return JsonResponse(success_response(None))


@require_GET
def session_view(request: HttpRequest):
    store = build_store()
    user = store.current_user
    return JsonResponse(success_response({
        "user": _serialize(user),
        "sections": list(store.visible_sections()),
    }))


@require_GET
def notifications_view(request: HttpRequest):
    entries = build_store().notifications.entries()
    return JsonResponse(success_response([n.to_dict() for n in entries]))


# ══════════════════════════════════════════════════════════════
# READS
# ══════════════════════════════════════════════════════════════

@require_GET
def dashboard_view(request: HttpRequest):
    return JsonResponse(success_response(build_store().dashboard().to_dict()))


@require_GET
def resource_list_view(request: HttpRequest, resource: str):
    try:
        kind = ResourceKind(resource.upper())
    except ValueError:
        return _json_error("UNKNOWN_RESOURCE", f"Unknown resource '{resource}'.", status=404)

    store = build_store()
    if kind == ResourceKind.ATTENDANCE:
        rows = store.attendance_rows()
    else:
        rows = store.visible(kind)
    return JsonResponse(success_response([_serialize(row) for row in rows]))


@require_GET
def payroll_workers_view(request: HttpRequest):
    workers = build_store().eligible_workers()
    return JsonResponse(success_response([w.to_dict() for w in workers]))


@require_GET
def payroll_own_view(request: HttpRequest):
    estimates = build_store().own_payroll_estimates()
    return JsonResponse(success_response([_serialize(e) for e in estimates]))


# ══════════════════════════════════════════════════════════════
# WRITES
# ══════════════════════════════════════════════════════════════

@csrf_exempt
@require_POST
def warehouse_add_view(request: HttpRequest):
    return _dispatch_write(build_store().add_warehouse, _WAREHOUSE_FIELDS, request)


@csrf_exempt
@require_POST
def warehouse_update_view(request: HttpRequest):
    return _dispatch_write(build_store().update_warehouse, _WAREHOUSE_FIELDS, request)


@csrf_exempt
@require_POST
def inventory_add_view(request: HttpRequest):
    return _dispatch_write(build_store().add_inventory_item, _ITEM_FIELDS, request)


@csrf_exempt
@require_POST
def inventory_update_view(request: HttpRequest):
    return _dispatch_write(build_store().update_inventory_item, _ITEM_FIELDS, request)


@csrf_exempt
@require_POST
def attendance_check_in_view(request: HttpRequest):
    store = build_store()
    try:
        body = _parse_json_body(request)
        actor = store.current_actor
        # Defaults to the signed-in user at their own warehouse.
        user_id = body.get("user_id") or (actor.actor_id if actor else "")
        warehouse_id = body.get("warehouse_id") or (
            actor.assigned_warehouse_id if actor else ""
        )
        shift = _enum(Shift)(body.get("shift", Shift.MORNING.value))
        result = store.check_in(user_id, warehouse_id or "", shift)
    except ValueError as exc:
        return _json_error("INVALID_REQUEST", str(exc), status=400)
    return _result_response(result)


@csrf_exempt
@require_POST
def attendance_check_out_view(request: HttpRequest):
    return _dispatch_write(build_store().check_out, {"record_id": str}, request)


@csrf_exempt
@require_POST
def order_fulfill_view(request: HttpRequest):
    return _dispatch_write(build_store().fulfill_order, {"order_id": str}, request)


@csrf_exempt
@require_POST
def customer_add_view(request: HttpRequest):
    return _dispatch_write(build_store().add_customer, _CUSTOMER_FIELDS, request)


@csrf_exempt
@require_POST
def invoice_generate_view(request: HttpRequest):
    return _dispatch_write(build_store().generate_invoice, {"order_id": str}, request)


@csrf_exempt
@require_POST
def payment_record_view(request: HttpRequest):
    parsers = {
        "invoice_id": str,
        "amount": _decimal,
        "method": _enum(PaymentMethod),
    }
    return _dispatch_write(build_store().record_payment, parsers, request)


@csrf_exempt
@require_POST
def payroll_estimate_view(request: HttpRequest):
    parsers = {
        "user_id": str,
        "start_date": _date,
        "end_date": _date,
        "hours_worked": _decimal,
    }
    return _dispatch_write(build_store().create_payroll_estimate, parsers, request)


@csrf_exempt
@require_POST
def user_add_view(request: HttpRequest):
    return _dispatch_write(build_store().add_user, _USER_FIELDS, request)


@csrf_exempt
@require_POST
def user_update_view(request: HttpRequest):
    return _dispatch_write(build_store().update_user, _USER_FIELDS, request)


@csrf_exempt
@require_POST
def user_delete_view(request: HttpRequest):
    return _dispatch_write(build_store().delete_user, {"user_id": str}, request)
