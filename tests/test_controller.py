"""Tests for event translation and the layout contract."""

from __future__ import annotations

import pygame

from snake_game.controller import GameController, KEY_MAP, pressed_keys
from snake_game.model import Key


def _keydown(key: int) -> pygame.event.Event:
    return pygame.event.Event(pygame.KEYDOWN, key=key)


def test_every_logical_key_has_a_binding() -> None:
    assert set(KEY_MAP.values()) == set(Key)


def test_keydowns_become_a_key_snapshot() -> None:
    events = [_keydown(pygame.K_UP), _keydown(pygame.K_l), _keydown(pygame.K_EQUALS)]

    assert pressed_keys(events) == {Key.UP, Key.L, Key.EQUAL}


def test_unbound_keys_and_key_releases_are_ignored() -> None:
    events = [
        _keydown(pygame.K_a),
        pygame.event.Event(pygame.KEYUP, key=pygame.K_SPACE),
        pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(10, 10)),
    ]

    assert pressed_keys(events) == frozenset()


def test_closing_the_window_counts_as_quit() -> None:
    assert pressed_keys([pygame.event.Event(pygame.QUIT)]) == {Key.Q}


def test_repeated_presses_collapse() -> None:
    events = [_keydown(pygame.K_SPACE), _keydown(pygame.K_SPACE)]

    assert pressed_keys(events) == {Key.SPACE}


def test_layout_is_fixed() -> None:
    assert GameController.layout(1920, 1080) == (640, 480)
    assert GameController.layout(100, 100) == (640, 480)
