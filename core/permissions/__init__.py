"""
FOS Permissions - Public API
============================
"""

from core.permissions.constants import (
    ALL_SECTIONS,
    GRANT_SCOPE_ALL,
    GRANT_SCOPE_SELF,
    GRANT_SCOPE_WAREHOUSE,
    GRANT_SCOPE_WAREHOUSE_WORKERS,
    Action,
    ResourceKind,
)
from core.permissions.models import AccessScope, Grant
from core.permissions.provider import (
    DEFAULT_ROLE_GRANTS,
    DEFAULT_ROLE_SECTIONS,
    PermissionProvider,
    StaticPermissionProvider,
)
from core.permissions.registry import (
    COMMAND_PERMISSION_MAP,
    resolve_required_permission,
)
from core.permissions.evaluator import (
    PermissionEvaluationResult,
    PermissionEvaluator,
)
from core.permissions.visibility import (
    can_access,
    filter_visible,
    row_scope,
    visible_sections,
)

__all__ = [
    "ALL_SECTIONS",
    "GRANT_SCOPE_ALL",
    "GRANT_SCOPE_SELF",
    "GRANT_SCOPE_WAREHOUSE",
    "GRANT_SCOPE_WAREHOUSE_WORKERS",
    "Action",
    "ResourceKind",
    "AccessScope",
    "Grant",
    "DEFAULT_ROLE_GRANTS",
    "DEFAULT_ROLE_SECTIONS",
    "PermissionProvider",
    "StaticPermissionProvider",
    "COMMAND_PERMISSION_MAP",
    "resolve_required_permission",
    "PermissionEvaluationResult",
    "PermissionEvaluator",
    "can_access",
    "filter_visible",
    "row_scope",
    "visible_sections",
]
