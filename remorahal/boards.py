"""Identify Raspberry Pi boards from device-tree compatible strings."""

from dataclasses import dataclass
from pathlib import Path

DEFAULT_COMPATIBLE_PATH = "/proc/device-tree/compatible"

BOARD_MAKE = "raspberrypi"
SOC_MAKE = "brcm"

BCM2712 = "bcm2712"
BCM2711 = "bcm2711"
BCM2837 = "bcm2837"
BCM2836 = "bcm2836"
BCM2835 = "bcm2835"

KNOWN_SOCS = (BCM2712, BCM2711, BCM2837, BCM2836, BCM2835)

# Models whose SoC is fixed; older boards take theirs from the device tree.
MODEL_SOC = {
    "5-compute-module": BCM2712,
    "5-model-b": BCM2712,
    "4-compute-module": BCM2711,
    "4-model-b": BCM2711,
    "400": BCM2711,
    "3-compute-module": BCM2837,
    "3-model-b-plus": BCM2837,
    "3-model-a-plus": BCM2837,
    "3-model-b": BCM2837,
    "model-zero-2-w": BCM2837,
}

KNOWN_MODELS = (
    "5-compute-module",
    "5-model-b",
    "4-compute-module",
    "4-model-b",
    "400",
    "3-compute-module",
    "3-model-b-plus",
    "3-model-a-plus",
    "3-model-b",
    "2-model-b",
    "compute-module",
    "model-b-plus",
    "model-a-plus",
    "model-b-rev2",
    "model-b",
    "model-a",
    "model-zero-2-w",
    "model-zero-w",
    "model-zero",
)

SUPPORTED_SOCS = frozenset({BCM2712, BCM2711, BCM2837})


@dataclass(frozen=True)
class Board:
    """A detected board: its model, its SoC (if known) and its compatible string."""

    model: str
    soc: str | None

    @property
    def compatible(self):
        return f"{BOARD_MAKE},{self.model}"

    @property
    def supported(self):
        """True for boards of the RPi 3 generation and newer."""
        return self.soc in SUPPORTED_SOCS


def parse_compatible(data):
    """Split a NUL-separated compatible list into its non-empty strings."""
    if isinstance(data, (bytes, bytearray)):
        data = bytes(data).decode("ascii", errors="replace")
    return [item for item in data.split("\0") if item]


def _split(entry):
    make, sep, model = entry.partition(",")
    return (make, model) if sep else (None, None)


def detect_board(data):
    """Return the Board described by compatible data, or None if unrecognised."""
    model = None
    soc = None
    for entry in parse_compatible(data):
        make, name = _split(entry)
        if make == BOARD_MAKE and model is None and name in KNOWN_MODELS:
            model = name
        elif make == SOC_MAKE and soc is None and name in KNOWN_SOCS:
            soc = name
    if model is None:
        return None
    return Board(model=model, soc=soc or MODEL_SOC.get(model))


def read_compatible(path=DEFAULT_COMPATIBLE_PATH):
    """Read and split the compatible list from a device-tree file."""
    return parse_compatible(Path(path).read_bytes())