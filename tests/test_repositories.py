"""Tests for the SQLite repositories."""

from decimal import Decimal

from halo_crm.config.settings import BusinessSettings
from halo_crm.domain.appointment import RecurrenceRule
from halo_crm.domain.expense import BonusEntry, Expense
from halo_crm.repositories.sqlite.factory import create_sqlite_container

from conftest import make_appointment


def test_appointment_round_trip(container):
    appointment = make_appointment(
        id="series-1",
        client_ids=["c1", "c2"],
        client_names=["Jane", "Ann"],
        recurrence=RecurrenceRule("WEEKLY", 2, [1, 3], "2024-06-30"),
        number_of_people=2,
        override_price=Decimal("150.50"),
        notes="Bring photos",
    )
    container.appointments.save(appointment)

    loaded = container.appointments.get_by_id("series-1")

    assert loaded == appointment
    assert loaded.kind == "series"
    assert isinstance(loaded.override_price, Decimal)


def test_save_updates_existing_row(container):
    container.appointments.save(make_appointment(id="a1"))
    container.appointments.save(make_appointment(id="a1", time="15:00", status="PENDING"))

    stored = container.appointments.list_all()
    assert len(stored) == 1
    assert stored[0].time == "15:00"
    assert stored[0].status == "PENDING"


def test_list_all_orders_by_date_and_time(container):
    container.appointments.save(make_appointment(id="b", date="2024-03-05", time="09:00"))
    container.appointments.save(make_appointment(id="a", date="2024-03-04", time="16:00"))
    container.appointments.save(make_appointment(id="c", date="2024-03-04", time="08:00"))

    assert [a.id for a in container.appointments.list_all()] == ["c", "a", "b"]


def test_delete_and_missing_lookup(container):
    container.appointments.save(make_appointment(id="a1"))

    assert container.appointments.delete("a1")
    assert not container.appointments.delete("a1")
    assert container.appointments.get_by_id("a1") is None


def test_override_keeps_parent(container):
    container.appointments.save(
        make_appointment(id="x", kind="override", parent_id="series-1", status="COMPLETED")
    )
    loaded = container.appointments.get_by_id("x")
    assert loaded.is_override
    assert loaded.parent_id == "series-1"


def test_services(container):
    assert [s.name for s in container.services.list_all()] == [
        "Bridal Party Styling",
        "Color Consultation",
        "Signature Haircut",
    ]
    bridal = container.services.find_by_name("BRIDAL")
    assert bridal.id == "s4"
    assert bridal.price_per_person is True
    assert bridal.price == Decimal("65")
    assert container.services.find_by_name("massage") is None
    assert container.services.get_by_id("s2").duration_minutes == 30


def test_expenses_and_bonus_entries(container):
    container.expenses.save_expense(
        Expense("e1", "Shampoo", Decimal("120.25"), "2024-03-01", "Supplies")
    )
    container.expenses.save_expense(Expense("e2", "Ads", Decimal("40"), "2024-03-05", "Marketing"))
    container.expenses.save_bonus_entry(
        BonusEntry("b1", "Gift card", Decimal("50"), "2024-03-02")
    )

    expenses = container.expenses.list_expenses()
    assert [e.id for e in expenses] == ["e2", "e1"]
    assert expenses[1].amount == Decimal("120.25")
    assert container.expenses.list_bonus_entries()[0].description == "Gift card"

    assert container.expenses.delete_expense("e2")
    assert [e.id for e in container.expenses.list_expenses()] == ["e1"]


def test_system_config_keeps_description(container):
    container.config.set("tax_rate", "25", "Estimated tax %")
    container.config.set("tax_rate", "30")

    setting = container.config.get("tax_rate")
    assert setting.value == "30"
    assert setting.description == "Estimated tax %"
    assert container.config.get_value("missing", "fallback") == "fallback"
    assert container.config.delete("tax_rate")
    assert container.config.get("tax_rate") is None


def test_business_settings_defaults(container, monkeypatch):
    monkeypatch.delenv("BUSINESS_NAME", raising=False)

    settings = BusinessSettings.load(container.config)

    assert settings.business_name == "Halo Studio"
    assert settings.tax_rate == Decimal("20")
    assert settings.monthly_revenue_goal == Decimal("5000")
    assert settings.deductible_categories == ["Supplies", "Rent", "Marketing"]


def test_db_path_from_environment(tmp_path, monkeypatch):
    db_path = tmp_path / "nested" / "env.db"
    monkeypatch.setenv("HALO_DB_PATH", str(db_path))

    container = create_sqlite_container()
    container.appointments.save(make_appointment())

    assert db_path.exists()


def test_system_config_lists_all(container):
    container.config.set("monthly_revenue_goal", "8000")
    container.config.set("deductible_categories", "Supplies")

    assert [c.key for c in container.config.get_all()] == [
        "deductible_categories",
        "monthly_revenue_goal",
    ]
    assert BusinessSettings.load(container.config).deductible_categories == ["Supplies"]
