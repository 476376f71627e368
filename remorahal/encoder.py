"""Scaled position and velocity from the raw encoder counts of a Remora board."""

from dataclasses import dataclass

MAX_ENCODER = 8
DEFAULT_NUM_ENCODER = 3

_MIN_SCALE = 1e-20


@dataclass
class Encoder:
    """One encoder channel: its pins plus the state kept between captures."""

    reset: bool = False
    raw_count: float = 0.0
    phase_z: bool = False
    index_enable: bool = False
    position_scale: float = 0.0
    position: float = 0.0
    velocity: float = 0.0
    count: float = 0.0
    index_count: float = 0.0
    old_position: float = 0.0
    old_scale: float = 0.0
    scale: float = 0.0

    def _update_scale(self):
        if self.position_scale == self.old_scale:
            return
        self.old_scale = self.position_scale
        if -_MIN_SCALE < self.position_scale < _MIN_SCALE:
            # Too small to divide by; fall back to unity scaling.
            self.position_scale = 1.0
        self.scale = 1.0 / self.position_scale

    def capture(self, period):
        """Update count, position and velocity; period is in nanoseconds."""
        if period <= 0:
            raise ValueError("period must be positive")
        self._update_scale()

        # The raw count is never reset; the public count is relative to index_count.
        if self.reset:
            self.index_count = self.raw_count
        if self.phase_z and self.index_enable:
            self.index_count = self.raw_count
            self.index_enable = False

        self.count = self.raw_count - self.index_count
        self.old_position = self.position
        self.position = self.count * self.scale
        self.velocity = (self.position - self.old_position) / (period * 1e-9)
        return self.position


def encoder_names(num_encoder=0, names=None):
    """Return the name prefix of each encoder from a count or an explicit list."""
    names = list(names or [])
    if num_encoder and names:
        raise ValueError("num_encoder and names are mutually exclusive")
    if not num_encoder and not names:
        num_encoder = DEFAULT_NUM_ENCODER

    if num_encoder:
        howmany = num_encoder
        result = [f"encoder.{n}" for n in range(max(howmany, 0))]
    else:
        result = []
        for name in names[:MAX_ENCODER]:
            if not name:
                break
            result.append(name)
        howmany = len(result)

    if howmany <= 0 or howmany > MAX_ENCODER:
        raise ValueError(f"invalid number of encoders: {howmany}")
    return result


class EncoderBank:
    """All encoder channels of the component, captured together."""

    def __init__(self, num_encoder=0, names=None):
        self.encoders = {name: Encoder() for name in encoder_names(num_encoder, names)}

    def __getitem__(self, name):
        return self.encoders[name]

    def __iter__(self):
        return iter(self.encoders.values())

    def __len__(self):
        return len(self.encoders)

    def capture(self, period):
        """Capture every encoder; returns their positions keyed by name."""
        return {name: enc.capture(period) for name, enc in self.encoders.items()}