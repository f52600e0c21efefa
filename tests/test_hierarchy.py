import pytest

from people.access import is_manager_or_self
from people.hierarchy import (
    HierarchyCycleError,
    PersonNotFound,
    all_reports,
    is_manager_of,
    manager_chain,
    mapping_lookup,
    mapping_reports_lookup,
)
from people.models import Person

# =============================================================================
# In-memory lookup
# =============================================================================

CHAIN = mapping_lookup({"a": None, "b": "a", "c": "b", "d": None})


class TestIsManagerOfInMemory:
    def test_direct_manager(self):
        assert is_manager_of("b", "c", lookup=CHAIN) is True

    def test_indirect_manager(self):
        assert is_manager_of("a", "c", lookup=CHAIN) is True

    def test_report_is_not_manager(self):
        assert is_manager_of("c", "a", lookup=CHAIN) is False

    def test_unrelated_person(self):
        assert is_manager_of("d", "c", lookup=CHAIN) is False

    def test_not_own_manager(self):
        assert is_manager_of("c", "c", lookup=CHAIN) is False

    def test_root_has_no_manager(self):
        assert is_manager_of("b", "a", lookup=CHAIN) is False

    def test_missing_target_fails_fast(self):
        with pytest.raises(PersonNotFound) as exc:
            is_manager_of("a", "nobody", lookup=CHAIN)
        assert exc.value.person_id == "nobody"

    def test_cycle_raises_instead_of_looping(self):
        looped = mapping_lookup({"x": "y", "y": "z", "z": "x"})
        with pytest.raises(HierarchyCycleError) as exc:
            is_manager_of("nobody", "x", lookup=looped)
        assert exc.value.path == ["x", "y", "z", "x"]

    def test_match_before_cycle_is_still_found(self):
        looped = mapping_lookup({"x": "y", "y": "x"})
        assert is_manager_of("y", "x", lookup=looped) is True

    def test_self_loop(self):
        with pytest.raises(HierarchyCycleError):
            is_manager_of("q", "p", lookup=mapping_lookup({"p": "p"}))


class TestManagerOrSelf:
    def test_self(self):
        assert is_manager_or_self("c", "c", lookup=CHAIN) is True

    def test_manager(self):
        assert is_manager_or_self("a", "c", lookup=CHAIN) is True

    def test_report(self):
        assert is_manager_or_self("c", "b", lookup=CHAIN) is False

    def test_missing_self_fails_fast(self):
        with pytest.raises(PersonNotFound):
            is_manager_or_self("zz", "zz", lookup=CHAIN)


class TestManagerChain:
    def test_order_is_bottom_up(self):
        assert manager_chain("c", lookup=CHAIN) == ["b", "a"]

    def test_root(self):
        assert manager_chain("a", lookup=CHAIN) == []


class TestAllReportsInMemory:
    def test_descendants(self):
        reports = mapping_reports_lookup({"a": None, "b": "a", "c": "b", "d": None})
        assert all_reports("a", reports_lookup=reports) == {"b", "c"}
        assert all_reports("d", reports_lookup=reports) == set()

    def test_cycle_is_cut(self):
        reports = mapping_reports_lookup({"x": "y", "y": "x"})
        assert all_reports("x", reports_lookup=reports) == {"y"}


# =============================================================================
# ORM lookup
# =============================================================================

@pytest.mark.django_db
class TestIsManagerOfOrm:
    def test_chain(self, alice, bob, carol, dave):
        assert is_manager_of(alice.pk, carol.pk)
        assert is_manager_of(bob.pk, carol.pk)
        assert not is_manager_of(carol.pk, alice.pk)
        assert not is_manager_of(dave.pk, carol.pk)

    def test_missing_target(self, alice):
        with pytest.raises(PersonNotFound):
            is_manager_of(alice.pk, 999999)

    def test_corrupted_rows(self, alice, bob):
        # تجاوز clean() لمحاكاة بيانات تالفة
        Person.all_objects.filter(pk=alice.pk).update(manager=bob)
        with pytest.raises(HierarchyCycleError):
            is_manager_of(999999, bob.pk)

    def test_manager_chain(self, alice, bob, carol):
        assert manager_chain(carol.pk) == [bob.pk, alice.pk]

    def test_all_reports(self, alice, bob, carol, dave):
        assert all_reports(alice.pk) == {bob.pk, carol.pk}
        assert all_reports(carol.pk) == set()

    def test_all_reports_survives_cycle(self, alice, bob, carol):
        Person.all_objects.filter(pk=alice.pk).update(manager=carol)
        assert all_reports(alice.pk) == {bob.pk, carol.pk}
