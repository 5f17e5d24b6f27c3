# PATH: apps/domains/picks/management/commands/show_scoreboard.py
"""
현재 리더보드를 터미널에 출력 (HTTP /picks/scoreboard/ 와 같은 use case 사용)

사용:
  python manage.py show_scoreboard --limit=10
"""
from django.core.management.base import BaseCommand

from pickpool.adapters.db.django.uow import DjangoUnitOfWork
from pickpool.application.use_cases.picks.read_entries import get_scoreboard
from pickpool.domain.picks.catalog import QUESTIONS_COUNT


class Command(BaseCommand):
    help = "Print the current leaderboard."

    def add_arguments(self, parser):
        parser.add_argument(
            "--limit",
            type=int,
            default=None,
            help="Maximum rows to print (default: all)",
        )

    def handle(self, *args, **options):
        board = get_scoreboard(DjangoUnitOfWork(), limit=options["limit"])

        if not board.leaderboard:
            self.stdout.write("No entries yet.")
            return

        if board.master is None:
            self.stdout.write(self.style.WARNING(
                "Master sheet not set yet. Scores will appear once it is."
            ))

        for row in board.leaderboard:
            rank = f"{row.rank:>3}" if row.rank is not None else "  -"
            score = f"{row.score}/{QUESTIONS_COUNT}" if row.score is not None else "Pending"
            self.stdout.write(f"{rank}  {row.entry.name:<30} {score}")
