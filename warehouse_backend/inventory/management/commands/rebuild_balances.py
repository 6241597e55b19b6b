# inventory/management/commands/rebuild_balances.py

from django.core.management.base import BaseCommand, CommandError

from inventory.services.ledger import rebuild_balances


class Command(BaseCommand):
    help = "Recompute stock balances from the append-only ledger"

    def add_arguments(self, parser):
        parser.add_argument(
            "--check",
            action="store_true",
            help="Only report drift; do not write. Exits non-zero when drift exists.",
        )

    def handle(self, *args, **options):
        check_only = options["check"]
        drift = rebuild_balances(dry_run=check_only)

        for d in drift:
            self.stdout.write(
                f"{d.warehouse_code}/{d.product_code}: balance={d.balance} ledger={d.ledger}"
            )

        if not drift:
            self.stdout.write(self.style.SUCCESS("Balances match the ledger."))
            return

        if check_only:
            raise CommandError(f"{len(drift)} balance(s) drifted from the ledger.")

        self.stdout.write(self.style.SUCCESS(f"Rebuilt {len(drift)} balance(s) from the ledger."))
