# -*- coding: utf-8 -*-
"""Tests for the wizard screen graph."""

from __future__ import annotations

import pytest

from gameimage_wizard.core.messages import Msg
from gameimage_wizard.core.navigator import FLOWS, WizardNavigator
from gameimage_wizard.core.session import Platform


@pytest.fixture
def navigator() -> WizardNavigator:
    return WizardNavigator()


def test_welcome_leads_to_platform(navigator: WizardNavigator) -> None:
    assert navigator.previous_of(Msg.DRAW_WELCOME) is None
    assert navigator.next_of(Msg.DRAW_WELCOME) is Msg.DRAW_PLATFORM
    assert navigator.next_of(Msg.DRAW_PLATFORM) is Msg.DRAW_FETCH


@pytest.mark.parametrize("platform", list(Platform))
def test_flow_head_goes_back_to_platform(navigator: WizardNavigator, platform: Platform) -> None:
    first = navigator.first(platform)
    assert navigator.previous_of(first) is Msg.DRAW_PLATFORM


@pytest.mark.parametrize("platform", list(Platform))
def test_flow_tail_goes_to_creator(navigator: WizardNavigator, platform: Platform) -> None:
    last = navigator.flow(platform)[-1]
    assert last.name.endswith("_COMPRESS")
    assert navigator.next_of(last) is Msg.DRAW_CREATOR


@pytest.mark.parametrize("platform", list(Platform))
def test_flow_edges_are_symmetric(navigator: WizardNavigator, platform: Platform) -> None:
    flow = navigator.flow(platform)
    for current, following in zip(flow, flow[1:]):
        assert navigator.next_of(current) is following
        assert navigator.previous_of(following) is current


def test_wine_and_custom_url_share_flow(navigator: WizardNavigator) -> None:
    assert navigator.flow(Platform.WINE) == navigator.flow(Platform.WINE_URL)
    assert navigator.first(Platform.WINE_URL) is Msg.DRAW_WINE_NAME


def test_wine_environment_is_side_screen(navigator: WizardNavigator) -> None:
    assert Msg.DRAW_WINE_ENVIRONMENT not in FLOWS[Platform.WINE]
    assert navigator.previous_of(Msg.DRAW_WINE_ENVIRONMENT) is Msg.DRAW_WINE_CONFIGURE
    assert navigator.next_of(Msg.DRAW_WINE_ENVIRONMENT) is None


def test_creator_desktop_finish(navigator: WizardNavigator) -> None:
    assert navigator.next_of(Msg.DRAW_CREATOR) is Msg.DRAW_DESKTOP
    assert navigator.next_of(Msg.DRAW_DESKTOP) is Msg.DRAW_FINISH
    assert navigator.previous_of(Msg.DRAW_DESKTOP) is Msg.DRAW_CREATOR
    assert navigator.next_of(Msg.DRAW_FINISH) is None


def test_unknown_screen_raises(navigator: WizardNavigator) -> None:
    with pytest.raises(KeyError):
        navigator.next_of(Msg.STATUS)


def test_platform_of(navigator: WizardNavigator) -> None:
    assert navigator.platform_of(Msg.DRAW_RPCS3_BIOS) is Platform.RPCS3
    assert navigator.platform_of(Msg.DRAW_WINE_TRICKS) is Platform.WINE
    assert navigator.platform_of(Msg.DRAW_CREATOR) is None


def test_every_draw_message_is_in_the_graph(navigator: WizardNavigator) -> None:
    draws = {kind for kind in Msg if not kind.is_control}
    assert draws == navigator.screens()


@pytest.mark.parametrize("platform", list(Platform))
def test_reachable_ends_at_finish(navigator: WizardNavigator, platform: Platform) -> None:
    path = navigator.reachable(platform)
    assert path[:3] == [Msg.DRAW_WELCOME, Msg.DRAW_PLATFORM, Msg.DRAW_FETCH]
    assert path[-3:] == [Msg.DRAW_CREATOR, Msg.DRAW_DESKTOP, Msg.DRAW_FINISH]
    assert len(path) == len(set(path))
