"""Domain services."""

from forum.domain.service import tree
from forum.domain.service.identity_service import IdentityService
from forum.domain.service.permission_service import PermissionService, compute_permissions

__all__ = [
    "IdentityService",
    "PermissionService",
    "compute_permissions",
    "tree",
]
