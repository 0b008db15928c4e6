"""
Users module
Sample tenant-scoped aggregate built on the kernel primitives
"""
from nexus_kernel.users.domain import (
    USER_ACTIVATED,
    USER_DEACTIVATED,
    USER_EMAIL_CHANGED,
    USER_REGISTERED,
    User,
)

__all__ = ["User", "USER_ACTIVATED", "USER_DEACTIVATED", "USER_EMAIL_CHANGED", "USER_REGISTERED"]
