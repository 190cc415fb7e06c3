"""Render decoded patterns as Standard MIDI Files.

Every step is a sixteenth note. Tracks go out on the General MIDI drum
channel, one MIDI track per pattern track.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Dict, List

import mido

from .pattern import Pattern, Track

logger = logging.getLogger(__name__)

DRUM_CHANNEL = 9  # channel 10 in 1-based numbering
DEFAULT_TICKS_PER_BEAT = 480
DEFAULT_VELOCITY = 100
FALLBACK_BASE_NOTE = 36
FALLBACK_SPAN = 46  # GM percussion runs 35..81
MAX_TEMPO_US = 0xFFFFFF  # set_tempo holds 24 bits of microseconds per beat
META_CHARSET = "latin-1"

# General MIDI percussion keys for the track names seen in saved patterns.
GM_DRUM_NOTES: Dict[str, int] = {
    "kick": 36,
    "bass drum": 36,
    "rim": 37,
    "rimshot": 37,
    "snare": 38,
    "clap": 39,
    "low-tom": 45,
    "lo tom": 45,
    "mid-tom": 47,
    "hi-tom": 50,
    "hh-close": 42,
    "hh-closed": 42,
    "closed hh": 42,
    "hh-open": 46,
    "open hh": 46,
    "crash": 49,
    "ride": 51,
    "tambourine": 54,
    "cowbell": 56,
    "maracas": 70,
    "clave": 75,
}


def _meta_text(text: str) -> str:
    """Replace characters the track_name meta event cannot carry."""
    return text.encode(META_CHARSET, errors="replace").decode(META_CHARSET)


def drum_note_for(track: Track) -> int:
    note = GM_DRUM_NOTES.get(track.name.strip().lower())
    if note is not None:
        return note
    return FALLBACK_BASE_NOTE + track.id % FALLBACK_SPAN


def _track_messages(
    track: Track, *, bars: int, step_ticks: int, velocity: int
) -> List[mido.Message]:
    note = drum_note_for(track)
    gate = step_ticks // 2
    messages: List[mido.Message] = []
    last_tick = 0
    for bar in range(bars):
        bar_start = bar * len(track.steps) * step_ticks
        for step in track.active_steps():
            on_tick = bar_start + step * step_ticks
            messages.append(
                mido.Message(
                    "note_on",
                    channel=DRUM_CHANNEL,
                    note=note,
                    velocity=velocity,
                    time=on_tick - last_tick,
                )
            )
            messages.append(
                mido.Message(
                    "note_off", channel=DRUM_CHANNEL, note=note, velocity=0, time=gate
                )
            )
            last_tick = on_tick + gate
    return messages


def pattern_to_midi(
    pattern: Pattern,
    *,
    bars: int = 1,
    ticks_per_beat: int = DEFAULT_TICKS_PER_BEAT,
    velocity: int = DEFAULT_VELOCITY,
) -> mido.MidiFile:
    """Build a type-1 MIDI file that loops ``pattern`` for ``bars`` bars."""

    if not pattern.tempo > 0:
        raise ValueError(f"cannot export tempo {pattern.tempo!r}; must be positive")
    if bars < 1:
        raise ValueError(f"bars must be >= 1, got {bars}")
    if ticks_per_beat % 4:
        raise ValueError(f"ticks_per_beat must be a multiple of 4, got {ticks_per_beat}")

    tempo_us = mido.bpm2tempo(pattern.tempo)
    if not 1 <= tempo_us <= MAX_TEMPO_US:
        raise ValueError(
            f"cannot export tempo {pattern.tempo!r}; outside the MIDI set_tempo range"
        )

    step_ticks = ticks_per_beat // 4
    mid = mido.MidiFile(type=1, ticks_per_beat=ticks_per_beat)

    conductor = mido.MidiTrack()
    conductor.append(
        mido.MetaMessage("track_name", name=_meta_text(pattern.version), time=0)
    )
    conductor.append(mido.MetaMessage("set_tempo", tempo=tempo_us, time=0))
    conductor.append(
        mido.MetaMessage("time_signature", numerator=4, denominator=4, time=0)
    )
    conductor.append(mido.MetaMessage("end_of_track", time=0))
    mid.tracks.append(conductor)

    for track in pattern.tracks:
        midi_track = mido.MidiTrack()
        midi_track.append(
            mido.MetaMessage("track_name", name=_meta_text(track.name), time=0)
        )
        midi_track.extend(
            _track_messages(track, bars=bars, step_ticks=step_ticks, velocity=velocity)
        )
        midi_track.append(mido.MetaMessage("end_of_track", time=0))
        mid.tracks.append(midi_track)
        logger.debug(
            "track %r -> note %d, %d hits/bar",
            track.name,
            drum_note_for(track),
            len(track.active_steps()),
        )

    return mid


def write_midi(pattern: Pattern, path: str | Path, **kwargs) -> Path:
    """Save ``pattern`` as a MIDI file at ``path``.

    The file is written under a temporary name and moved into place once
    complete, so a failed save leaves nothing at ``path``.
    """
    out = Path(path)
    mid = pattern_to_midi(pattern, **kwargs)
    partial = out.with_name(out.name + ".part")
    try:
        mid.save(str(partial))
    except BaseException:
        partial.unlink(missing_ok=True)
        raise
    os.replace(partial, out)
    return out
