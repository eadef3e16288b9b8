"""Tests for Arena id issuing, deferred removal, and compaction."""

import pytest

from lane_racer.arena import Arena


def test_add_issues_increasing_ids():
    arena: Arena[str] = Arena()
    assert arena.add("a") == 0
    assert arena.add("b") == 1
    assert len(arena) == 2


def test_removed_entity_hidden_before_compact():
    arena: Arena[str] = Arena()
    a = arena.add("a")
    arena.add("b")
    arena.remove(a)
    assert not arena.alive(a)
    assert list(arena) == ["b"]
    assert len(arena) == 1
    assert arena.pending == frozenset({a})


def test_compact_drops_pending():
    arena: Arena[str] = Arena()
    a = arena.add("a")
    arena.remove(a)
    assert arena.compact() == 1
    assert arena.pending == frozenset()
    assert arena.compact() == 0


def test_ids_not_reused_after_compact():
    arena: Arena[str] = Arena()
    a = arena.add("a")
    arena.remove(a)
    arena.compact()
    assert arena.add("b") == 1


def test_remove_twice_counts_once():
    arena: Arena[str] = Arena()
    a = arena.add("a")
    arena.remove(a)
    arena.remove(a)
    assert len(arena) == 0
    assert arena.compact() == 1


def test_remove_unknown_is_noop():
    arena: Arena[str] = Arena()
    arena.remove(42)
    assert arena.pending == frozenset()


def test_get():
    arena: Arena[str] = Arena()
    a = arena.add("a")
    assert arena.get(a) == "a"
    arena.remove(a)
    with pytest.raises(KeyError):
        arena.get(a)


def test_mutation_during_iteration():
    arena: Arena[int] = Arena()
    for i in range(4):
        arena.add(i)
    seen = []
    for eid, value in arena.items():
        seen.append(value)
        arena.remove(eid)
        if value == 0:
            arena.add(99)
    # Snapshot iteration: the entity added mid-loop waits for the next pass.
    assert seen == [0, 1, 2, 3]
    assert list(arena) == [99]


def test_clear():
    arena: Arena[str] = Arena()
    arena.add("a")
    arena.remove(arena.add("b"))
    arena.clear()
    assert len(arena) == 0
    assert arena.pending == frozenset()
