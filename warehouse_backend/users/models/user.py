"""
PATH: users/models/user.py

CUSTOM USER MODEL

- Staff log in with username + password.
- role decides capabilities (see permissions/roles.py).
- Ledger entries reference the acting user; users are deactivated, not deleted.
"""

from __future__ import annotations

import uuid

from django.contrib.auth.models import AbstractBaseUser, BaseUserManager, PermissionsMixin
from django.core.exceptions import ValidationError
from django.db import models


# ---------------- USER MANAGER ----------------
class UserManager(BaseUserManager):
    def create_user(self, username=None, password=None, **extra_fields):
        username = (username or "").strip()
        if not username:
            raise ValueError("A username is required")

        email = (extra_fields.pop("email", "") or "").strip()
        if email:
            extra_fields["email"] = self.normalize_email(email)

        extra_fields.setdefault("is_active", True)

        user = self.model(username=username, **extra_fields)

        if password:
            user.set_password(password)
        else:
            user.set_unusable_password()

        user.full_clean(exclude=["password"])
        user.save(using=self._db)
        return user

    def create_superuser(self, username, password=None, **extra_fields):
        if not password:
            raise ValueError("Superuser must have a password")

        extra_fields.setdefault("role", "admin")
        extra_fields.setdefault("is_staff", True)
        extra_fields.setdefault("is_superuser", True)

        if extra_fields.get("is_staff") is not True:
            raise ValueError("Superuser must have is_staff=True")
        if extra_fields.get("is_superuser") is not True:
            raise ValueError("Superuser must have is_superuser=True")

        return self.create_user(username=username, password=password, **extra_fields)


# ---------------- USER MODEL ----------------
class User(AbstractBaseUser, PermissionsMixin):
    ROLE_CHOICES = [
        ("admin", "Admin"),
        ("sales", "Sales"),
        ("warehouse", "Warehouse"),
        ("supply", "Supply"),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    username = models.CharField(max_length=150, unique=True)
    name = models.CharField(max_length=150, blank=True)
    email = models.EmailField(blank=True)

    role = models.CharField(max_length=20, choices=ROLE_CHOICES)

    is_active = models.BooleanField(default=True)
    is_staff = models.BooleanField(default=False)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = UserManager()

    USERNAME_FIELD = "username"
    REQUIRED_FIELDS = []

    class Meta:
        ordering = ["username"]

    def clean(self):
        self.username = (self.username or "").strip()
        if not self.username:
            raise ValidationError("User must have a username")

    def __str__(self):
        return f"{self.username} ({self.role})"
