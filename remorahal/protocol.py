"""Constants and tag helpers for the Remora PRU data exchange."""

JOINTS = 4
VARIABLES = 3
DIGITAL_OUTPUTS = 16
DIGITAL_INPUTS = 32

PRU_DATA = 0x64617461  # "data"
PRU_READ = 0x72656164  # "read"
PRU_WRITE = 0x77726974  # "writ"
PRU_ESTOP = 0x65737470  # "estp"

STEPBIT = 22
STEP_MASK = 1 << STEPBIT
STEP_OFFSET = 1 << (STEPBIT - 1)

PRU_BASEFREQ = 60000

_TAG_LENGTH = 4


def encode_tag(text):
    """Return the 32-bit header value for a four-character ASCII tag."""
    try:
        raw = text.encode("ascii")
    except UnicodeEncodeError as exc:
        raise ValueError(f"tag {text!r} is not ASCII") from exc
    if len(raw) != _TAG_LENGTH:
        raise ValueError(f"tag {text!r} must be exactly {_TAG_LENGTH} characters")
    return int.from_bytes(raw, "big")


def decode_tag(value):
    """Return the four-character tag held in a 32-bit header value."""
    if not 0 <= value <= 0xFFFFFFFF:
        raise ValueError(f"header value {value} does not fit in 32 bits")
    raw = value.to_bytes(_TAG_LENGTH, "big")
    try:
        return raw.decode("ascii")
    except UnicodeDecodeError as exc:
        raise ValueError(f"header value {value:#010x} is not an ASCII tag") from exc