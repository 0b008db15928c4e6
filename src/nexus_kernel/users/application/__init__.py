from nexus_kernel.users.application.activate_user import ActivateUser
from nexus_kernel.users.application.register_user import RegisterUser

__all__ = ["ActivateUser", "RegisterUser"]
