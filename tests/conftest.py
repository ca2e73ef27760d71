"""Test configuration and shared fixtures."""

import pytest

from admin_ui.components import ViewContext
from admin_ui.models import Page, Record, RecordSet


class Person(Record):
    attributes = ("id", "name", "email")
    attribute_labels = {"email": "Email"}


@pytest.fixture
def person_model():
    return Person


@pytest.fixture
def people():
    return [
        Person(id=1, name="Ann", email="a@x.com"),
        Person(id=2, name="Bo", email="b@x.com"),
    ]


@pytest.fixture
def make_page():
    """Build a page of ``Person`` records."""
    def _make_page(records, number=1, per_page=25, total_count=None):
        return Page(
            records=RecordSet(Person, tuple(records)),
            number=number,
            per_page=per_page,
            total_count=len(records) if total_count is None else total_count,
        )
    return _make_page


@pytest.fixture
def view_context():
    return ViewContext(url="http://testserver/admin/people?per_page=2")
