"""Shared fixtures."""

from decimal import Decimal

import pytest

from halo_crm.container import reset_container, set_container
from halo_crm.domain.appointment import Appointment
from halo_crm.domain.service import Service
from halo_crm.repositories.sqlite.factory import create_sqlite_container


@pytest.fixture(autouse=True)
def quiet_logs(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "error")


@pytest.fixture
def services():
    return [
        Service("s1", "Signature Haircut", Decimal("85"), 60),
        Service("s2", "Color Consultation", Decimal("40"), 30),
        Service("s4", "Bridal Party Styling", Decimal("65"), 90, price_per_person=True),
    ]


@pytest.fixture
def container(tmp_path, services):
    container = create_sqlite_container(str(tmp_path / "halo.db"))
    for service in services:
        container.services.save(service)
    set_container(container)
    yield container
    reset_container()


def make_appointment(**overrides) -> Appointment:
    data = {
        "id": "a1",
        "date": "2024-01-01",
        "time": "10:00",
        "service_id": "s1",
        "client_ids": ["c1"],
        "client_names": ["Jane"],
    }
    data.update(overrides)
    return Appointment(**data)
