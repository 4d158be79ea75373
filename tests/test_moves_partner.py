"""Tests for switches, advance and retire, turns and swings."""

from __future__ import annotations

import pytest
from conftest import assert_all_home

from ceilivis.errors import ConfigurationError
from ceilivis.moves import get_move
from ceilivis.moves.builtin.partner import (
    advance_and_retire,
    fast_sevens_with_partner,
    switch_with_partner,
    swing_partner,
    swing_partner_end_facing_center,
    turn_partner_halfway_by_the_right,
)
from ceilivis.types import Position


@pytest.mark.asyncio
async def test_switch_swaps_partners_and_keeps_rotation(two_facing_two):
    dancers = two_facing_two.dancers
    rotations = {role: d.pose.rotation for role, d in dancers.items()}

    await two_facing_two.run_move(switch_with_partner)

    assert not two_facing_two.failures
    assert dancers[Position.FIRST_TOP_LEAD].current_named_position is Position.FIRST_TOP_FOLLOW
    assert dancers[Position.FIRST_TOP_FOLLOW].current_named_position is Position.FIRST_TOP_LEAD
    assert dancers[Position.SECOND_TOP_LEAD].current_named_position is Position.SECOND_TOP_FOLLOW
    assert dancers[Position.SECOND_TOP_FOLLOW].current_named_position is Position.SECOND_TOP_LEAD
    for role, dancer in dancers.items():
        assert dancer.pose.rotation == rotations[role]


@pytest.mark.asyncio
async def test_switch_moves_onto_partner_home(square):
    await square.run_move(switch_with_partner)
    lead = square.dancers[Position.FIRST_TOP_LEAD]
    assert (lead.pose.x, lead.pose.y) == (-150, 0)
    assert square.animator.now == 4


@pytest.mark.asyncio
async def test_fast_sevens_switches_twice(square):
    await square.run_move(fast_sevens_with_partner)
    assert not square.failures
    assert_all_home(square)
    assert square.status.text == "Fast Sevens"


@pytest.mark.asyncio
async def test_switch_needs_pairs(three_facing_three):
    with pytest.raises(ConfigurationError):
        await switch_with_partner(three_facing_three)


@pytest.mark.asyncio
async def test_advance_and_retire_goes_in_and_back(square):
    await square.run_move(advance_and_retire)
    track = square.animator.track(Position.FIRST_TOP_LEAD, "xy")
    assert [s.end_value for s in track] == [(0.0, 50.0), (0.0, 0.0)]
    side = square.animator.track(Position.FIRST_SIDE_LEAD, "xy")
    assert side[0].end_value == (-50.0, 0.0)
    assert_all_home(square)
    assert square.animator.now == 8


@pytest.mark.asyncio
async def test_turn_partner_halfway_swaps_and_turns(two_facing_two):
    await two_facing_two.run_move(turn_partner_halfway_by_the_right)
    lead = two_facing_two.dancers[Position.FIRST_TOP_LEAD]
    assert lead.current_named_position is Position.FIRST_TOP_FOLLOW
    assert (lead.pose.x, lead.pose.y) == pytest.approx((-150, 0))
    assert lead.pose.rotation == 180


@pytest.mark.asyncio
async def test_swing_comes_back_round(two_facing_two):
    await two_facing_two.run_move(swing_partner)
    assert not two_facing_two.failures
    assert_all_home(two_facing_two)
    for dancer in two_facing_two.dancers.values():
        assert dancer.pose.rotation == two_facing_two.home(dancer.role).rotation


@pytest.mark.asyncio
async def test_swing_end_facing_center(square):
    await square.run_move(swing_partner_end_facing_center)
    assert not square.failures
    assert_all_home(square)
    side = square.dancers[Position.FIRST_SIDE_FOLLOW]
    assert side.pose.rotation == 90


def test_aliases_registered():
    assert get_move("swing") is swing_partner
    assert get_move("fast_sevens") is fast_sevens_with_partner
