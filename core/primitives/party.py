"""
FOS Party Primitive — Customer
================================
Customers buy from FOS warehouses. They are created by the Owner or a
WarehouseAdmin; there is no update or delete path.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class CustomerType(Enum):
    COMPANY = "COMPANY"
    INDIVIDUAL = "INDIVIDUAL"


@dataclass(frozen=True)
class Customer:
    customer_id: str
    name: str
    customer_type: CustomerType
    contact_person: str = ""
    email: str = ""
    phone: str = ""

    def __post_init__(self):
        if not self.customer_id or not isinstance(self.customer_id, str):
            raise ValueError("customer_id must be non-empty string.")
        if not self.name or not isinstance(self.name, str):
            raise ValueError("name must be non-empty string.")
        if not isinstance(self.customer_type, CustomerType):
            raise ValueError("customer_type must be CustomerType enum.")

    def to_dict(self) -> dict:
        return {
            "customer_id": self.customer_id,
            "name": self.name,
            "customer_type": self.customer_type.value,
            "contact_person": self.contact_person,
            "email": self.email,
            "phone": self.phone,
        }
