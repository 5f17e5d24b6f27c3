from __future__ import annotations

import pytest

from apps.domains.picks.models import PickEntry

pytestmark = pytest.mark.django_db

MASTER_URL = "/api/v1/picks/admin/master/"


def test_anonymous_cannot_read_or_save(api_client):
    assert api_client.get(MASTER_URL).status_code in (401, 403)
    res = api_client.post(MASTER_URL, {"answers": {"question_1": 1}}, format="json")
    assert res.status_code in (401, 403)
    assert PickEntry.objects.count() == 0


def test_non_staff_is_forbidden(api_client, django_user_model):
    user = django_user_model.objects.create_user(username="player", password="pw")
    api_client.force_authenticate(user=user)

    assert api_client.get(MASTER_URL).status_code == 403
    assert api_client.post(MASTER_URL, {"tiebreaker": 1}, format="json").status_code == 403


def test_get_master_before_first_save_is_null(admin_client):
    res = admin_client.get(MASTER_URL)

    assert res.status_code == 200
    assert res.json() == {"master": None}


def test_partial_saves_merge(admin_client):
    first = admin_client.post(
        MASTER_URL,
        {"answers": {"question_1": 0, "question_2": 1}, "tiebreaker": 100},
        format="json",
    )
    assert first.status_code == 200
    assert first.json()["ok"] is True

    second = admin_client.post(MASTER_URL, {"answers": {"question_1": "1"}}, format="json")

    master = second.json()["master"]
    assert master["answers"]["question_1"] == 1
    assert master["answers"]["question_2"] == 1
    assert master["answers"]["question_3"] is None
    assert master["tiebreaker"] == 100.0
    assert PickEntry.objects.filter(is_master=True).count() == 1

    assert admin_client.get(MASTER_URL).json()["master"] == master


@pytest.mark.parametrize("body", [{}, {"answers": {}}, {"answers": None, "tiebreaker": ""}])
def test_empty_update_is_400(admin_client, body):
    res = admin_client.post(MASTER_URL, body, format="json")

    assert res.status_code == 400
    assert res.json()["detail"] == "No updates provided."
    assert PickEntry.objects.count() == 0


def test_unknown_question_is_400(admin_client):
    res = admin_client.post(MASTER_URL, {"answers": {"question_42": 1}}, format="json")

    assert res.status_code == 400
    assert res.json()["field"] == "question_42"


def test_bad_value_is_400(admin_client):
    res = admin_client.post(MASTER_URL, {"answers": {"question_1": 7}}, format="json")

    assert res.status_code == 400
    assert res.json()["field"] == "question_1"


def test_jwt_admin_can_save(api_client, admin_user):
    token = api_client.post(
        "/api/v1/token/",
        {"username": "pool-admin", "password": "pool-admin-pw"},
        format="json",
    ).json()["access"]
    api_client.credentials(HTTP_AUTHORIZATION=f"Bearer {token}")

    res = api_client.post(MASTER_URL, {"tiebreaker": 42}, format="json")

    assert res.status_code == 200
    assert res.json()["master"]["tiebreaker"] == 42.0


def test_store_failure_on_first_save_is_500_and_rolls_back(admin_client, monkeypatch):
    from django.db import DatabaseError
    from django.db.models.query import QuerySet

    def fail_update_or_create(self, defaults=None, **kwargs):
        raise DatabaseError("disk I/O error")

    monkeypatch.setattr(QuerySet, "update_or_create", fail_update_or_create)

    res = admin_client.post(MASTER_URL, {"answers": {"question_1": 1}}, format="json")

    assert res.status_code == 500
    assert res.json() == {"detail": "Failed to save master sheet."}
    # lock 단계에서 만든 빈 sentinel 행도 남지 않아야 함
    assert PickEntry.objects.count() == 0


def test_huge_tiebreaker_is_400(admin_client):
    res = admin_client.post(MASTER_URL, {"tiebreaker": 10**400}, format="json")

    assert res.status_code == 400
    assert res.json()["field"] == "tiebreaker"
    assert PickEntry.objects.count() == 0
