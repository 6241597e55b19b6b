# users/management/commands/seed_users.py

from __future__ import annotations

import os
from dataclasses import dataclass

from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand, CommandError
from django.db import transaction

from permissions.roles import ROLE_ADMIN, ROLE_SALES, ROLE_SUPPLY, ROLE_WAREHOUSE


@dataclass(frozen=True)
class SeedUserSpec:
    username: str
    role: str
    name: str


SEED_USERS = [
    SeedUserSpec("admin", ROLE_ADMIN, "System Admin"),
    SeedUserSpec("sales1", ROLE_SALES, "Sales 1"),
    SeedUserSpec("sales2", ROLE_SALES, "Sales 2"),
    SeedUserSpec("warehouse1", ROLE_WAREHOUSE, "Warehouse Keeper"),
    SeedUserSpec("supply1", ROLE_SUPPLY, "Supply 1"),
    SeedUserSpec("supply2", ROLE_SUPPLY, "Supply 2"),
]


class Command(BaseCommand):
    help = "Seed staff users (admin, sales, warehouse, supply)."

    def add_arguments(self, parser):
        parser.add_argument(
            "--password",
            type=str,
            default=os.environ.get("SEED_USER_PASSWORD", ""),
            help="Password for seeded users (default: $SEED_USER_PASSWORD)",
        )
        parser.add_argument(
            "--force-password",
            action="store_true",
            help="Reset password for existing seeded users too.",
        )

    @transaction.atomic
    def handle(self, *args, **options):
        password = options.get("password") or ""
        force_password = bool(options.get("force_password"))

        if len(password) < 6:
            raise CommandError("--password (or SEED_USER_PASSWORD) must be at least 6 characters.")

        User = get_user_model()

        created_count = 0
        updated_count = 0

        for spec in SEED_USERS:
            is_admin = spec.role == ROLE_ADMIN

            user, created = User.objects.get_or_create(
                username=spec.username,
                defaults={
                    "role": spec.role,
                    "name": spec.name,
                    "is_staff": is_admin,
                    "is_superuser": is_admin,
                    "is_active": True,
                },
            )

            if created or force_password:
                user.set_password(password)

            if not created:
                user.role = spec.role
                user.name = spec.name
                user.is_active = True
                updated_count += 1
            else:
                created_count += 1

            user.save()

        self.stdout.write(
            self.style.SUCCESS(
                f"Users seeded. created={created_count} updated={updated_count}"
            )
        )
