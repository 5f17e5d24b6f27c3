from __future__ import annotations

from io import StringIO

import pytest
from django.core.management import call_command
from django.core.management.base import CommandError

from pickpool.adapters.db.django.uow import DjangoUnitOfWork
from pickpool.application.use_cases.picks.save_master import save_master
from pickpool.application.use_cases.picks.submit_entry import submit_entry

from picks_factories import answers_with_correct, make_answers

pytestmark = pytest.mark.django_db


def _run(*args, **kwargs) -> str:
    out = StringIO()
    call_command(*args, stdout=out, **kwargs)
    return out.getvalue()


class TestEnsurePoolAdmin:
    def test_creates_staff_user(self, django_user_model):
        output = _run("ensure_pool_admin", "--username=boss", "--password=s3cret")

        user = django_user_model.objects.get(username="boss")
        assert user.is_staff
        assert user.check_password("s3cret")
        assert "Created" in output

    def test_updates_existing_user(self, django_user_model):
        django_user_model.objects.create_user(username="boss", password="old")

        output = _run("ensure_pool_admin", "--username=boss", "--password=new")

        user = django_user_model.objects.get(username="boss")
        assert user.is_staff
        assert user.check_password("new")
        assert "Updated" in output

    def test_blank_password_rejected(self):
        with pytest.raises(CommandError):
            _run("ensure_pool_admin", "--username=boss", "--password=  ")


class TestShowScoreboard:
    def test_no_entries(self):
        assert "No entries yet." in _run("show_scoreboard")

    def test_pending_without_master(self):
        submit_entry(DjangoUnitOfWork(), "Amy", make_answers(1), 1)

        output = _run("show_scoreboard")

        assert "Master sheet not set yet" in output
        assert "Amy" in output
        assert "Pending" in output

    def test_ranked_rows_with_limit(self):
        uow = DjangoUnitOfWork()
        submit_entry(uow, "Amy", answers_with_correct(5), 1)
        submit_entry(uow, "Bob", answers_with_correct(3), 1)
        save_master(uow, answers=make_answers(1))

        output = _run("show_scoreboard", "--limit=1")

        assert "Amy" in output
        assert "5/19" in output
        assert "Bob" not in output
