"""Unit tests for CustomerDjangoRepository.

Covers:
- Instantiation and interface compliance.
- CRUD operations: create, find_all, find_by_id, update, delete.
- Domain look-ups: find_by_email, find_by_available_credit.
- Atomic credit increment and schema-level guarantees.
"""

from __future__ import annotations

from decimal import Decimal

import pytest
from django.db import IntegrityError, transaction

from modules.customers.constants import DATABASE_ID_LENGTH, SortOrder
from modules.customers.entities import Customer
from modules.customers.models import CustomerModel
from modules.customers.repositories.django_repository import CustomerDjangoRepository

pytestmark = pytest.mark.unit

ABSENT_ID = "0" * DATABASE_ID_LENGTH


@pytest.fixture()
def repo() -> CustomerDjangoRepository:
    return CustomerDjangoRepository()


def _add(repo, name, credit, email=None) -> Customer:
    email = email or f"{name.lower().replace(' ', '.')}@example.com"
    return repo.create(
        Customer(name=name, email=email, available_credit=Decimal(credit))
    )


# ===========================================================================
# Instantiation
# ===========================================================================


class TestRepositoryInstantiation:
    def test_can_instantiate(self, repo):
        assert repo is not None

    def test_is_instance_of_interface(self, repo):
        from modules.customers.repositories.interfaces import ICustomerRepository

        assert isinstance(repo, ICustomerRepository)


# ===========================================================================
# create
# ===========================================================================


class TestCreate:
    def test_persists_and_assigns_hex_id(self, repo):
        customer = _add(repo, "John Doe", "500")
        assert len(customer.id) == DATABASE_ID_LENGTH
        int(customer.id, 16)
        assert CustomerModel.objects.filter(id=customer.id).exists()

    def test_returns_stored_values(self, repo):
        customer = _add(repo, "John Doe", "500", email="john.doe@example.com")
        assert customer.name == "John Doe"
        assert customer.email == "john.doe@example.com"
        assert customer.available_credit == Decimal("500")

    def test_duplicate_email_is_rejected_by_schema(self, repo):
        _add(repo, "John Doe", "500", email="dup@example.com")
        with pytest.raises(IntegrityError), transaction.atomic():
            _add(repo, "Jane Doe", "100", email="dup@example.com")


# ===========================================================================
# find_all / find_by_id / find_by_email
# ===========================================================================


class TestFind:
    def test_find_all_returns_insertion_order(self, repo):
        names = ["Charlie", "Alice", "Bob"]
        for name in names:
            _add(repo, name, "10")
        assert [c.name for c in repo.find_all()] == names

    def test_find_all_empty(self, repo):
        assert repo.find_all() == []

    def test_find_by_id_round_trip(self, repo):
        customer = _add(repo, "Jane Doe", "300")
        assert repo.find_by_id(customer.id) == customer

    def test_find_by_id_returns_none_when_not_found(self, repo):
        assert repo.find_by_id(ABSENT_ID) is None

    def test_find_by_email(self, repo):
        customer = _add(repo, "Jane Doe", "300", email="found@example.com")
        result = repo.find_by_email("found@example.com")
        assert result is not None
        assert result.id == customer.id

    def test_find_by_email_returns_none_when_not_found(self, repo):
        assert repo.find_by_email("ghost@example.com") is None


# ===========================================================================
# update
# ===========================================================================


class TestUpdate:
    def test_writes_only_supplied_fields(self, repo):
        customer = _add(repo, "Original Name", "100", email="original@example.com")
        updated = repo.update(customer.id, {"name": "Updated Name"})
        assert updated.name == "Updated Name"
        assert updated.email == "original@example.com"
        assert updated.available_credit == Decimal("100")
        refreshed = CustomerModel.objects.get(id=customer.id)
        assert refreshed.name == "Updated Name"

    def test_empty_change_set_keeps_record(self, repo):
        customer = _add(repo, "Same Name", "100")
        assert repo.update(customer.id, {}) == customer

    def test_returns_none_when_not_found(self, repo):
        assert repo.update(ABSENT_ID, {"name": "Ghost"}) is None


# ===========================================================================
# delete
# ===========================================================================


class TestDelete:
    def test_hard_deletes_existing_customer(self, repo):
        customer = _add(repo, "Delete Me", "200")
        repo.delete(customer.id)
        assert not CustomerModel.objects.filter(id=customer.id).exists()

    def test_absent_id_is_a_no_op(self, repo):
        _add(repo, "Keep Me", "200")
        repo.delete(ABSENT_ID)
        assert CustomerModel.objects.count() == 1


# ===========================================================================
# find_by_available_credit
# ===========================================================================


class TestFindByAvailableCredit:
    def test_descending(self, repo):
        for name, credit in [("Alice", "100"), ("Bob", "200"), ("Charlie", "50")]:
            _add(repo, name, credit)
        result = repo.find_by_available_credit(SortOrder.DESC)
        assert [c.name for c in result] == ["Bob", "Alice", "Charlie"]

    def test_ascending(self, repo):
        for name, credit in [("Alice", "100"), ("Bob", "200"), ("Charlie", "50")]:
            _add(repo, name, credit)
        result = repo.find_by_available_credit(SortOrder.ASC)
        assert [c.name for c in result] == ["Charlie", "Alice", "Bob"]

    @pytest.mark.parametrize("order", [SortOrder.ASC, SortOrder.DESC])
    def test_ties_keep_natural_order(self, repo, order):
        for name in ["Tie One", "Tie Two", "Tie Three"]:
            _add(repo, name, "100")
        result = repo.find_by_available_credit(order)
        assert [c.name for c in result] == [c.name for c in repo.find_all()]


# ===========================================================================
# increment_credit
# ===========================================================================


class TestIncrementCredit:
    def test_adds_amount(self, repo):
        customer = _add(repo, "Credit Test", "100")
        updated = repo.increment_credit(customer.id, Decimal("50"))
        assert updated.available_credit == Decimal("150")

    def test_successive_increments_accumulate(self, repo):
        customer = _add(repo, "Credit Test", "200")
        repo.increment_credit(customer.id, Decimal("25.50"))
        repo.increment_credit(customer.id, Decimal("74.50"))
        assert repo.find_by_id(customer.id).available_credit == Decimal("300")

    def test_returns_none_when_not_found(self, repo):
        assert repo.increment_credit(ABSENT_ID, Decimal("50")) is None


class TestClear:
    def test_removes_everything(self, repo):
        _add(repo, "One", "1")
        _add(repo, "Two", "2")
        repo.clear()
        assert repo.find_all() == []
