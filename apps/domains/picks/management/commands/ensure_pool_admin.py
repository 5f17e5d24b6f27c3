# PATH: apps/domains/picks/management/commands/ensure_pool_admin.py
"""
마스터 시트 관리자(staff) 계정 보장.

- username 유저 없으면 생성 (is_staff=True)
- 있으면 비밀번호만 맞추고 is_staff / is_active 켬

사용:
  python manage.py ensure_pool_admin --username=admin --password=change-me
"""
from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand, CommandError
from django.db import transaction


class Command(BaseCommand):
    help = "Ensure a staff user that can read and save the master sheet."

    def add_arguments(self, parser):
        parser.add_argument(
            "--username",
            type=str,
            default="admin",
            help="Login username (default: admin)",
        )
        parser.add_argument(
            "--password",
            type=str,
            required=True,
            help="Password to set for the admin user",
        )

    def handle(self, *args, **options):
        username = (options["username"] or "").strip()
        password = (options["password"] or "").strip()
        if not username:
            raise CommandError("--username must not be empty")
        if not password:
            raise CommandError("--password must not be empty")

        User = get_user_model()

        with transaction.atomic():
            user, created = User.objects.get_or_create(
                username=username,
                defaults={"is_active": True, "is_staff": True},
            )
            user.is_active = True
            user.is_staff = True
            user.set_password(password)
            user.save()

        if created:
            self.stdout.write(self.style.SUCCESS(f"Created admin user: {username}"))
        else:
            self.stdout.write(self.style.WARNING(f"Updated admin user: {username}"))
