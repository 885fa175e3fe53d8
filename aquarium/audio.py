"""Sound effects for the ``feed`` and ``splash`` notifications.

Tones are synthesized in pure Python into signed 16-bit PCM and played
through ``pygame.mixer``. Synthesis has no pygame dependency, so it can be
exercised without an audio device.

The sound board is a pure consumer: it subscribes to domain events on the
bus and never calls back into the simulation. If no audio device is
available it logs once and stays silent.
"""

from __future__ import annotations

import logging
import math
from array import array
from collections.abc import Iterable
from typing import Optional

import pygame

from aquarium.config.audio import MAX_AMPLITUDE, SAMPLE_RATE, SOUND_CUES
from aquarium.events.domain_events import FishAddedEvent, FoodDroppedEvent
from aquarium.events.event_bus import EventBus
from aquarium.exceptions import AudioError

logger = logging.getLogger(__name__)


def _ramp(start: float, end: float, t: float, kind: str) -> float:
    """Value of a ramp from ``start`` to ``end`` at fraction ``t`` of its length."""
    if kind == "exponential":
        return start * (end / start) ** t
    return start + (end - start) * t


def _waveform(kind: str, phase: float) -> float:
    """Sample a unit-amplitude waveform at ``phase`` (in cycles)."""
    if kind == "triangle":
        return 2.0 * abs(2.0 * (phase - math.floor(phase + 0.5))) - 1.0
    return math.sin(2.0 * math.pi * phase)


def render_segment(segment: dict, sample_rate: int = SAMPLE_RATE) -> list[float]:
    """Render one tone segment to float samples in [-1, 1].

    Frequency is integrated sample by sample so the sweep stays continuous.
    """
    count = int(segment["duration"] * sample_rate)
    f0, f1 = segment["freq"]
    g0, g1 = segment["gain"]
    samples = []
    phase = 0.0
    for i in range(count):
        t = i / count
        freq = _ramp(f0, f1, t, segment["freq_ramp"])
        gain = _ramp(g0, g1, t, segment["gain_ramp"])
        samples.append(gain * _waveform(segment["waveform"], phase))
        phase += freq / sample_rate
    return samples


def synthesize(segments: Iterable[dict], sample_rate: int = SAMPLE_RATE) -> array:
    """Mix tone segments into a mono signed 16-bit PCM buffer.

    Args:
        segments: Tone segment descriptions (see ``aquarium.config.audio``)
        sample_rate: Samples per second

    Returns:
        ``array('h')`` of PCM samples covering the longest segment end
    """
    segments = list(segments)
    total = max(int((s["start"] + s["duration"]) * sample_rate) for s in segments)
    mix = [0.0] * total
    for segment in segments:
        offset = int(segment["start"] * sample_rate)
        for i, value in enumerate(render_segment(segment, sample_rate)):
            if offset + i < total:
                mix[offset + i] += value
    return array("h", (int(max(-1.0, min(1.0, v)) * MAX_AMPLITUDE) for v in mix))


class SoundBoard:
    """Plays the feed/splash cues in response to domain events.

    Attributes:
        muted: Suppress playback while True
        available: Whether the mixer was opened successfully
    """

    def __init__(self, muted: bool = False, sample_rate: int = SAMPLE_RATE) -> None:
        self.muted: bool = muted
        self.sample_rate = sample_rate
        self.available: bool = False
        self._channels: int = 1
        self._sounds: dict[str, pygame.mixer.Sound] = {}

    def init(self) -> bool:
        """Open the mixer and pre-render every cue.

        Returns:
            True if audio is available
        """
        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init(frequency=self.sample_rate, size=-16, channels=1)
            frequency, _size, channels = pygame.mixer.get_init()
            self.sample_rate = frequency
            self._channels = channels
            self._sounds = {name: self._build_sound(cue) for name, cue in SOUND_CUES.items()}
        except (pygame.error, AudioError) as e:
            logger.warning("Audio unavailable, continuing without sound: %s", e)
            self.available = False
            return False
        self.available = True
        logger.debug("Audio ready at %d Hz, %d channel(s)", self.sample_rate, self._channels)
        return True

    def _build_sound(self, cue: list[dict]) -> pygame.mixer.Sound:
        pcm = synthesize(cue, self.sample_rate)
        if self._channels > 1:
            pcm = array("h", (sample for sample in pcm for _ in range(self._channels)))
        elif self._channels < 1:
            raise AudioError(f"Mixer reported {self._channels} channels")
        return pygame.mixer.Sound(buffer=pcm.tobytes())

    def attach(self, event_bus: EventBus) -> None:
        event_bus.subscribe_all((FoodDroppedEvent, FishAddedEvent), self.on_event)

    def on_event(self, event: object) -> None:
        self.play(getattr(event, "name", ""))

    def play(self, name: str) -> Optional[pygame.mixer.Channel]:
        if self.muted or not self.available:
            return None
        sound = self._sounds.get(name)
        if sound is None:
            logger.debug("No sound registered for %r", name)
            return None
        return sound.play()

    def toggle_mute(self) -> bool:
        self.muted = not self.muted
        logger.info("Sound %s", "muted" if self.muted else "unmuted")
        return self.muted
