"""
Shared fixtures.

Organization "acme" holds a small reporting line::

    alice (owner)
      └─ bob
           └─ carol
    dave (no manager)

Every person except dave is linked to a user. Organization "globex" holds
a single person, used for cross-tenant checks.
"""

import pytest

from base.models import Organization, OrganizationMember
from base.org_context import clear_organization
from people.models import Person
from tests.helpers import make_user


@pytest.fixture(autouse=True)
def _clean_org_context():
    clear_organization()
    yield
    clear_organization()


@pytest.fixture
def org(db):
    return Organization.objects.create(name="Acme", slug="acme")


@pytest.fixture
def other_org(db):
    return Organization.objects.create(name="Globex", slug="globex")


@pytest.fixture
def alice_user(org):
    return make_user("alice@acme.test", org, OrganizationMember.Role.OWNER)


@pytest.fixture
def bob_user(org):
    return make_user("bob@acme.test", org, OrganizationMember.Role.USER)


@pytest.fixture
def carol_user(org):
    return make_user("carol@acme.test", org, OrganizationMember.Role.USER)


@pytest.fixture
def admin_user(org):
    """Admin member without a linked person."""
    return make_user("admin@acme.test", org, OrganizationMember.Role.ADMIN)


@pytest.fixture
def alice(org, alice_user):
    return Person.all_objects.create(organization=org, name="Alice", email=alice_user.email, user=alice_user)


@pytest.fixture
def bob(org, bob_user, alice):
    return Person.all_objects.create(organization=org, name="Bob", email=bob_user.email, user=bob_user, manager=alice)


@pytest.fixture
def carol(org, carol_user, bob):
    return Person.all_objects.create(organization=org, name="Carol", email=carol_user.email, user=carol_user, manager=bob)


@pytest.fixture
def dave(org):
    return Person.all_objects.create(organization=org, name="Dave", email="dave@acme.test")


@pytest.fixture
def outsider_user(other_org):
    return make_user("zed@globex.test", other_org, OrganizationMember.Role.OWNER)


@pytest.fixture
def outsider(other_org, outsider_user):
    return Person.all_objects.create(organization=other_org, name="Zed", email=outsider_user.email, user=outsider_user)
