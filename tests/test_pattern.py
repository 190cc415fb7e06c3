"""Tests for the text rendering and dict views of decoded patterns."""

import struct

import pytest

from splice.decoder import decode
from splice.pattern import Pattern, Track, format_tempo


def _f32(value: float) -> float:
    return struct.unpack("<f", struct.pack("<f", value))[0]


def test_render_canonical(canonical):
    assert decode(canonical).render() == (
        "Saved with HW Version: 0.808-alpha\n"
        "Tempo: 120\n"
        "(0) kick\t|x---|x---|x---|x---|\n"
    )


def test_str_matches_render(canonical):
    pattern = decode(canonical)
    assert str(pattern) == pattern.render()


def test_render_multiple_tracks(build):
    data = build(
        version=b"0.708-alpha",
        tempo=999.0,
        tracks=[
            (1, b"Kick", bytes([1, 0, 0, 0] * 4)),
            (2, b"HiHat", bytes([1, 0, 1, 0] * 4)),
        ],
    )
    assert decode(data).render() == (
        "Saved with HW Version: 0.708-alpha\n"
        "Tempo: 999\n"
        "(1) Kick\t|x---|x---|x---|x---|\n"
        "(2) HiHat\t|x-x-|x-x-|x-x-|x-x-|\n"
    )


def test_render_non_binary_steps_as_rests():
    track = Track(id=7, name="cowbell", steps=bytes([2, 1, 255, 0] * 4))
    assert track.render_steps() == "|-x--|-x--|-x--|-x--|"
    assert track.active_steps() == [1, 5, 9, 13]


def test_render_without_tracks():
    pattern = Pattern(version="", tempo=_f32(240.0), tracks=())
    assert pattern.render() == "Saved with HW Version: \nTempo: 240\n"


@pytest.mark.parametrize(
    "value, text",
    [
        (120.0, "120"),
        (98.4, "98.4"),
        (118.2, "118.2"),
        (0.5, "0.5"),
        (0.0, "0"),
        (-3.25, "-3.25"),
    ],
)
def test_format_tempo_shortest(value, text):
    assert format_tempo(_f32(value)) == text


def test_to_dict(canonical):
    assert decode(canonical).to_dict() == {
        "version": "0.808-alpha",
        "tempo": 120.0,
        "tracks": [{"id": 0, "name": "kick", "steps": [1, 0, 0, 0] * 4}],
    }
