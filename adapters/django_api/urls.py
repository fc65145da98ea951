"""
FOS Django adapter URL routing.
"""

from django.urls import path

from adapters.django_api import views


urlpatterns = [
    path("session", views.session_view),
    path("session/login", views.session_login_view),
    path("session/logout", views.session_logout_view),
    path("notifications", views.notifications_view),
    path("dashboard", views.dashboard_view),
    path("payroll/workers", views.payroll_workers_view),
    path("payroll/mine", views.payroll_own_view),
    path("warehouses/add", views.warehouse_add_view),
    path("warehouses/update", views.warehouse_update_view),
    path("inventory/add", views.inventory_add_view),
    path("inventory/update", views.inventory_update_view),
    path("attendance/check-in", views.attendance_check_in_view),
    path("attendance/check-out", views.attendance_check_out_view),
    path("orders/fulfill", views.order_fulfill_view),
    path("customers/add", views.customer_add_view),
    path("invoices/generate", views.invoice_generate_view),
    path("payments/record", views.payment_record_view),
    path("payroll/estimate", views.payroll_estimate_view),
    path("users/add", views.user_add_view),
    path("users/update", views.user_update_view),
    path("users/delete", views.user_delete_view),
    path("<str:resource>", views.resource_list_view),
]
