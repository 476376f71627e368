"""Register-level GPIO access for the RP1 I/O controller."""

from remorahal.gpio import (
    NUM_GPIOS,
    Direction,
    Drive,
    FunctionSelect,
    Pull,
    function_names,
)

CHIP_NAME = "rp1"
CHIP_COMPATIBLE = "raspberrypi,rp1-gpio"
CHIP_SIZE = 0x30000

# Offsets are relative to the RP1 bar base; the GPIO block starts 0x0d0000 in.
IO_BANK_OFFSETS = (0x000D0000, 0x000D4000, 0x000D8000)
SYS_RIO_BANK_OFFSETS = (0x000E0000, 0x000E4000, 0x000E8000)
PADS_BANK_OFFSETS = (0x000F0000, 0x000F4000, 0x000F8000)

# Span of the register window, in bytes, that a default register file covers.
REGISTER_SPAN = 0x00100000

RW_OFFSET = 0x0000
XOR_OFFSET = 0x1000
SET_OFFSET = 0x2000
CLR_OFFSET = 0x3000

CTRL_FSEL_LSB = 0
CTRL_FSEL_MASK = 0x1F << CTRL_FSEL_LSB

PADS_OD_SET = 1 << 7
PADS_IE_SET = 1 << 6
PADS_PUE_SET = 1 << 3
PADS_PDE_SET = 1 << 2

SYS_RIO_OUT = 0x0
SYS_RIO_OE = 0x4
SYS_RIO_SYNC_IN = 0x8

BANK_BASES = (0, 28, 34)

_RP1_FSEL_COUNT = 9
_RP1_FSEL_SYS_RIO = 5
_RP1_FSEL_NULL = 0x1F

_WORD_MASK = 0xFFFFFFFF


def bank_for(gpio):
    """Return (bank, offset) of a GPIO number."""
    if not 0 <= gpio < NUM_GPIOS:
        raise ValueError(f"GPIO {gpio} out of range 0..{NUM_GPIOS - 1}")
    if gpio < BANK_BASES[1]:
        bank = 0
    elif gpio < BANK_BASES[2]:
        bank = 1
    else:
        bank = 2
    return bank, gpio - BANK_BASES[bank]


def _ctrl_offset(offset):
    return (offset * 2 + 1) * 4


def _pads_offset(offset):
    return 4 + offset * 4


def _as_words(base):
    try:
        view = memoryview(base)
    except TypeError:
        return base
    if view.format != "I":
        view = view.cast("B").cast("I")
    return view


class Rp1Gpio:
    """GPIO operations on an RP1 register window.

    ``base`` is the mapped register window as 32-bit words: a buffer (such
    as an mmap or bytearray) or any object indexable by word number.  With
    no ``base`` an all-zero in-memory register file is used.
    """

    name = CHIP_NAME
    compatible = CHIP_COMPATIBLE
    size = CHIP_SIZE

    def __init__(self, base=None):
        if base is None:
            base = [0] * (REGISTER_SPAN // 4)
        self.base = _as_words(base)

    def _read(self, peri_offset, reg_offset):
        return int(self.base[(peri_offset + reg_offset) // 4])

    def _write(self, peri_offset, reg_offset, value):
        self.base[(peri_offset + reg_offset) // 4] = value & _WORD_MASK

    def _ctrl_read(self, bank, offset):
        return self._read(IO_BANK_OFFSETS[bank], _ctrl_offset(offset))

    def _ctrl_write(self, bank, offset, value):
        self._write(IO_BANK_OFFSETS[bank], _ctrl_offset(offset), value)

    def _pads_read(self, bank, offset):
        return self._read(PADS_BANK_OFFSETS[bank], _pads_offset(offset))

    def _pads_write(self, bank, offset, value):
        self._write(PADS_BANK_OFFSETS[bank], _pads_offset(offset), value)

    def count(self):
        """Number of GPIOs on the chip."""
        return NUM_GPIOS

    def get_fsel(self, gpio):
        """Return the function currently selected for a GPIO."""
        bank, offset = bank_for(gpio)
        rsel = (self._ctrl_read(bank, offset) & CTRL_FSEL_MASK) >> CTRL_FSEL_LSB
        if rsel == _RP1_FSEL_SYS_RIO:
            return FunctionSelect.GPIO
        if rsel == _RP1_FSEL_NULL:
            return FunctionSelect.NONE
        if rsel < _RP1_FSEL_COUNT:
            return FunctionSelect(rsel)
        return FunctionSelect.MAX

    def set_fsel(self, gpio, func):
        """Select a function for a GPIO; unknown functions are ignored."""
        if 0 <= func < _RP1_FSEL_COUNT:
            rsel = int(func)
        elif func in (FunctionSelect.INPUT, FunctionSelect.OUTPUT, FunctionSelect.GPIO):
            rsel = _RP1_FSEL_SYS_RIO
        elif func == FunctionSelect.NONE:
            rsel = _RP1_FSEL_NULL
        else:
            return

        bank, offset = bank_for(gpio)
        if func == FunctionSelect.INPUT:
            self.set_dir(gpio, Direction.INPUT)
        elif func == FunctionSelect.OUTPUT:
            self.set_dir(gpio, Direction.OUTPUT)

        ctrl = self._ctrl_read(bank, offset) & ~CTRL_FSEL_MASK
        ctrl |= rsel << CTRL_FSEL_LSB
        self._ctrl_write(bank, offset, ctrl)

        old_pad = self._pads_read(bank, offset)
        if rsel == _RP1_FSEL_NULL:
            # Disable input and peripheral output.
            pad = (old_pad & ~PADS_IE_SET) | PADS_OD_SET
        else:
            pad = (old_pad | PADS_IE_SET) & ~PADS_OD_SET
        if pad != old_pad:
            self._pads_write(bank, offset, pad)

    def set_dir(self, gpio, direction):
        """Make a GPIO an input or an output."""
        bank, offset = bank_for(gpio)
        if direction == Direction.INPUT:
            alias = CLR_OFFSET
        elif direction == Direction.OUTPUT:
            alias = SET_OFFSET
        else:
            raise ValueError(f"invalid direction {direction!r}")
        self._write(SYS_RIO_BANK_OFFSETS[bank], SYS_RIO_OE + alias, 1 << offset)

    def get_dir(self, gpio):
        """Return whether a GPIO is an input or an output."""
        bank, offset = bank_for(gpio)
        reg = self._read(SYS_RIO_BANK_OFFSETS[bank], SYS_RIO_OE)
        return Direction.OUTPUT if reg & (1 << offset) else Direction.INPUT

    def get_level(self, gpio):
        """Return the observed level (0 or 1), or None if input is disabled."""
        bank, offset = bank_for(gpio)
        if not self._pads_read(bank, offset) & PADS_IE_SET:
            return None
        reg = self._read(SYS_RIO_BANK_OFFSETS[bank], SYS_RIO_SYNC_IN)
        return 1 if reg & (1 << offset) else 0

    def set_drive(self, gpio, drive):
        """Drive a GPIO output high or low; other values are ignored."""
        bank, offset = bank_for(gpio)
        if drive == Drive.HIGH:
            alias = SET_OFFSET
        elif drive == Drive.LOW:
            alias = CLR_OFFSET
        else:
            return
        self._write(SYS_RIO_BANK_OFFSETS[bank], SYS_RIO_OUT + alias, 1 << offset)

    def get_drive(self, gpio):
        """Return the level a GPIO is being driven to."""
        bank, offset = bank_for(gpio)
        reg = self._read(SYS_RIO_BANK_OFFSETS[bank], SYS_RIO_OUT)
        return Drive.HIGH if reg & (1 << offset) else Drive.LOW

    def set_pull(self, gpio, pull):
        """Set the pull resistor of a GPIO."""
        bank, offset = bank_for(gpio)
        reg = self._pads_read(bank, offset) & ~(PADS_PDE_SET | PADS_PUE_SET)
        if pull == Pull.UP:
            reg |= PADS_PUE_SET
        elif pull == Pull.DOWN:
            reg |= PADS_PDE_SET
        self._pads_write(bank, offset, reg)

    def get_pull(self, gpio):
        """Return the pull resistor setting of a GPIO."""
        bank, offset = bank_for(gpio)
        reg = self._pads_read(bank, offset)
        if reg & PADS_PUE_SET:
            return Pull.UP
        if reg & PADS_PDE_SET:
            return Pull.DOWN
        return Pull.NONE

    def get_name(self, gpio):
        """Return the name of a GPIO, or None if there is no such GPIO."""
        if not 0 <= gpio < NUM_GPIOS:
            return None
        return f"GPIO{gpio}"

    def get_fsel_name(self, gpio, fsel):
        """Return the name of a function on a GPIO, "-" if unused, None if unknown."""
        generic = {
            FunctionSelect.GPIO: "gpio",
            FunctionSelect.INPUT: "input",
            FunctionSelect.OUTPUT: "output",
            FunctionSelect.NONE: "none",
        }
        if fsel in generic:
            return generic[fsel]
        if FunctionSelect.FUNC0 <= fsel <= FunctionSelect.FUNC8:
            if not 0 <= gpio < NUM_GPIOS:
                return None
            return function_names(gpio)[fsel - FunctionSelect.FUNC0] or "-"
        return None