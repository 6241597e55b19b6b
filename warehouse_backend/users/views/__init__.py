from .auth import LoginView, UserCreateView
from .me import MeView

__all__ = [
    "LoginView",
    "MeView",
    "UserCreateView",
]
