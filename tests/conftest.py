from __future__ import annotations

import pytest


@pytest.fixture
def uow():
    from pickpool.adapters.db.django.uow import DjangoUnitOfWork
    return DjangoUnitOfWork()


@pytest.fixture
def api_client():
    from rest_framework.test import APIClient
    return APIClient()


@pytest.fixture
def admin_user(django_user_model):
    return django_user_model.objects.create_user(
        username="pool-admin",
        password="pool-admin-pw",
        is_staff=True,
    )


@pytest.fixture
def admin_client(admin_user):
    from rest_framework.test import APIClient
    client = APIClient()
    client.force_authenticate(user=admin_user)
    return client
