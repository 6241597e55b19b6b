# users/urls.py

from django.urls import path

from .views import LoginView, MeView, UserCreateView

app_name = "users"

urlpatterns = [
    # ---------------- PUBLIC AUTH ----------------
    path("login/", LoginView.as_view(), name="login"),
    # ---------------- AUTHENTICATED ----------------
    path("me/", MeView.as_view(), name="me"),
    path("users/", UserCreateView.as_view(), name="user-create"),
]
