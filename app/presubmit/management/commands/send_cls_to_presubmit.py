from __future__ import annotations

import json
import sys

from django.core.management.base import BaseCommand, CommandError
from presubmit.sender import ClsSender, ReportingError
from presubmit.sender.decision import PROCEED
from presubmit.services import ChangeRecord, DryRunWorkflow


class Command(BaseCommand):
    help = (
        "Decide which CL sets to send to presubmit testing. Reads a JSON list of "
        "CL sets and runs them against the dry-run workflow."
    )

    def add_arguments(self, parser) -> None:
        parser.add_argument(
            "batches",
            help="Path to a JSON file with a list of CL sets, or '-' for stdin.",
        )
        parser.add_argument(
            "--tests",
            nargs="+",
            help="Test names to run instead of PRESUBMIT_TESTS.",
        )

    def handle(self, *args, **options):
        cl_lists = self._load_cl_lists(options["batches"])
        worker = DryRunWorkflow(options["tests"])
        sender = ClsSender(cl_lists, worker)

        try:
            result = sender.send_cls_to_presubmit_test()
        except ReportingError as e:
            self._write_outcomes(e.result.outcomes)
            raise CommandError(str(e)) from e

        self._write_outcomes(result.outcomes)
        self.stdout.write(self.style.SUCCESS(f"Sent {result.cls_sent} CL(s) to presubmit test"))

    def _load_cl_lists(self, source: str) -> list[list[ChangeRecord]]:
        try:
            if source == "-":
                data = json.load(sys.stdin)
            else:
                with open(source, encoding="utf-8") as handle:
                    data = json.load(handle)
        except (OSError, ValueError) as e:
            raise CommandError(f"Unable to read CL sets from {source}: {e}") from e

        if not isinstance(data, list):
            raise CommandError("Expected a JSON list of CL sets")

        try:
            return [[ChangeRecord.from_dict(item) for item in batch] for batch in data]
        except (TypeError, ValueError, AttributeError) as e:
            raise CommandError(f"Invalid CL record: {e}") from e

    def _write_outcomes(self, outcomes: list[tuple[str, str]]) -> None:
        for cl_string, status in outcomes:
            line = f"  {status:24s} {cl_string or '-'}"
            if status == PROCEED:
                self.stdout.write(self.style.SUCCESS(line))
            else:
                self.stdout.write(line)
