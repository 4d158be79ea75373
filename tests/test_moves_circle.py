"""Tests for circles, inner circles and the full chain."""

from __future__ import annotations

import pytest
from conftest import assert_all_home

from ceilivis.errors import ConfigurationError
from ceilivis.moves.builtin.chain import full_chain
from ceilivis.moves.builtin.circle import (
    circle_left_halfway,
    follows_fast_inner_circle_left,
    follows_inner_quarter_circle_left_end_home,
    follows_inner_quarter_circle_right,
    leads_inner_quarter_circle_right,
    quarter_circle_left,
    quarter_circle_right,
)
from ceilivis.types import Position


class TestQuarterCircle:
    @pytest.mark.asyncio
    async def test_left_moves_one_same_role_slot(self, square):
        await square.run_move(quarter_circle_left)
        lead = square.dancers[Position.FIRST_TOP_LEAD]
        assert lead.current_named_position is Position.FIRST_SIDE_LEAD
        assert (lead.pose.x, lead.pose.y) == (125, 275)
        assert lead.pose.rotation == 90

    @pytest.mark.asyncio
    async def test_right_turns_the_stated_way(self, square):
        await square.run_move(quarter_circle_right)
        lead = square.dancers[Position.FIRST_TOP_LEAD]
        assert lead.current_named_position is Position.SECOND_SIDE_LEAD
        assert lead.pose.rotation == 270
        (turn,) = square.animator.track(Position.FIRST_TOP_LEAD, "rotation")
        assert turn.end_value == (-90,)

    @pytest.mark.asyncio
    async def test_passes_through_the_slot_between(self, square):
        await square.run_move(quarter_circle_left)
        between, arrive = square.animator.track(Position.FIRST_TOP_LEAD, "xy")
        home = square.home(Position.FIRST_TOP_LEAD)
        via = square.home(Position.FIRST_SIDE_FOLLOW)
        assert between.end_value == (via.x - home.x, via.y - home.y)
        assert arrive.end == 4

    @pytest.mark.asyncio
    async def test_four_quarters_come_home(self, square):
        for _ in range(4):
            await square.run_move(quarter_circle_left)
        assert not square.failures
        assert_all_home(square)
        for dancer in square.dancers.values():
            assert dancer.pose.rotation == square.home(dancer.role).rotation

    @pytest.mark.asyncio
    async def test_circle_halfway(self, square):
        await square.run_move(circle_left_halfway)
        assert square.dancers[Position.FIRST_TOP_LEAD].current_named_position is Position.SECOND_TOP_LEAD
        assert square.animator.now == 8

    @pytest.mark.asyncio
    async def test_square_only(self, two_facing_two):
        with pytest.raises(ConfigurationError, match="invalid formation"):
            await quarter_circle_left(two_facing_two)


class TestInnerCircle:
    @pytest.mark.asyncio
    async def test_follows_move_to_the_inner_ring(self, square):
        await square.run_move(follows_inner_quarter_circle_right)
        follow = square.dancers[Position.FIRST_TOP_FOLLOW]
        assert follow.current_named_position is Position.SECOND_SIDE_FOLLOW
        assert (follow.pose.x, follow.pose.y) == (-25, 275)

        lead = square.dancers[Position.FIRST_TOP_LEAD]
        assert lead.current_named_position is Position.FIRST_TOP_LEAD
        assert not square.animator.track(Position.FIRST_TOP_LEAD, "xy")

    @pytest.mark.asyncio
    async def test_end_home_lands_on_the_slot(self, square):
        await square.run_move(follows_inner_quarter_circle_right)
        await square.run_move(follows_inner_quarter_circle_left_end_home)
        assert_all_home(square)

    @pytest.mark.asyncio
    async def test_turned_around_dancers_walk_the_other_way(self, square):
        lead = square.dancers[Position.FIRST_TOP_LEAD]
        lead.turned_around = True
        await square.run_move(leads_inner_quarter_circle_right)
        assert lead.current_named_position is Position.FIRST_SIDE_LEAD
        other = square.dancers[Position.SECOND_SIDE_LEAD]
        assert other.current_named_position is Position.SECOND_TOP_LEAD

    @pytest.mark.asyncio
    async def test_end_home_clears_turned_around(self, square):
        await square.run_move(follows_inner_quarter_circle_right)
        follow = square.dancers[Position.FIRST_TOP_FOLLOW]
        follow.turned_around = True
        await square.run_move(follows_inner_quarter_circle_left_end_home)
        assert follow.turned_around is False
        assert follow.current_named_position is Position.SECOND_TOP_FOLLOW

    @pytest.mark.asyncio
    async def test_fast_inner_circle_returns_home(self, square):
        await square.run_move(follows_fast_inner_circle_left)
        assert not square.failures
        assert_all_home(square)
        assert square.animator.now == 8


@pytest.mark.asyncio
async def test_full_chain_goes_all_the_way_round(square):
    await square.run_move(full_chain)
    assert not square.failures
    assert_all_home(square)
    assert square.animator.now == 16
    assert square.status.text == "Full Chain"


@pytest.mark.asyncio
async def test_full_chain_in_three_facing_three(three_facing_three):
    await three_facing_three.run_move(full_chain)
    assert not three_facing_three.failures
    assert_all_home(three_facing_three)
