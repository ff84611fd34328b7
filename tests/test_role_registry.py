from __future__ import annotations

from agency_api.db.create_tables import init_database
from agency_api.domain.roles import ROLE_NAMES
from agency_api.services.role_registry import RoleRegistry


def test_seeded_roles_are_the_fixed_four(repo):
    registry = RoleRegistry(repo)

    names = [role["name"] for role in registry.list_roles()]
    assert names == ["Admin", "Agent", "Player", "ClubManager"]
    assert list(ROLE_NAMES) == names


def test_seeding_twice_adds_nothing(database, repo):
    registry = RoleRegistry(repo)
    before = registry.list_roles()

    assert registry.seed() == []
    init_database(database)

    assert registry.list_roles() == before
    assert len(before) == 4


def test_resolve_is_exact_and_case_sensitive(repo):
    registry = RoleRegistry(repo)

    player_id = registry.resolve("Player")
    assert isinstance(player_id, int)
    assert registry.resolve("player") is None
    assert registry.resolve("Coach") is None
    assert registry.resolve("") is None
    assert registry.resolve(None) is None
