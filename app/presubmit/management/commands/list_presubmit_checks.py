"""Management command to list the presubmit decision checks."""

from django.core.management.base import BaseCommand
from presubmit.sender.checks import get_all_checks


class Command(BaseCommand):
    help = "List the presubmit decision checks in the order they run"

    def handle(self, *args, **options):
        self.stdout.write(self.style.SUCCESS("\nPresubmit Checks:\n"))

        for check in get_all_checks():
            self.stdout.write(f"  {check['priority']:2d}. {check['id']:20s} - {check['name']}")

        self.stdout.write(
            self.style.WARNING(
                "\nThe first check that reaches a decision wins; "
                "CL sets passing every check are sent to presubmit test.\n"
            )
        )
