"""Tests for the built-in dance catalog."""

from __future__ import annotations

import pytest
from conftest import assert_all_home

from ceilivis.dances import DANCES, get_dance
from ceilivis.dances.catalog import bonfire_dance, three_tunes
from ceilivis.rotation import facing_direction
from ceilivis.types import Formation


def test_catalog_lookup_ignores_case():
    entry = get_dance("the three tunes")
    assert entry is not None
    assert entry.executor is three_tunes
    assert entry.formation is Formation.EIGHT_HAND_SQUARE
    assert get_dance("Siege of Ennis") is None
    assert set(DANCES) == {"The Three Tunes", "Bonfire Dance"}


def test_three_tunes_structure():
    assert list(three_tunes.figures) == ["Right Right/Left", "Rings"]
    assert len(three_tunes.figures["Right Right/Left"]) == 8
    steps = three_tunes.steps(three_tunes)
    assert steps == [three_tunes.figures["Right Right/Left"], three_tunes.figures["Rings"]]


@pytest.mark.asyncio
async def test_three_tunes_ends_where_it_started(square):
    await square.perform(three_tunes)
    assert not square.failures
    assert_all_home(square)
    for dancer in square.dancers.values():
        home = square.home(dancer.role)
        assert facing_direction(dancer.pose.rotation) is facing_direction(home.rotation)


@pytest.mark.asyncio
async def test_bonfire_dance(square):
    await square.perform(bonfire_dance)
    assert not square.failures
    for dancer in square.dancers.values():
        assert not dancer.turned_around
        assert not dancer.out_of_position
        if square.is_lead(dancer.role):
            assert dancer.current_named_position is dancer.role
        else:
            assert not square.is_lead(dancer.current_named_position)
            assert (dancer.pose.x, dancer.pose.y) == square.offset_to(
                dancer, square.home(dancer.current_named_position)
            )
