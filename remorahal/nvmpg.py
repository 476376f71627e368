"""Pendant (MPG) driver that mirrors machine state to a Remora board over UDP."""

import logging
import math
import socket
import struct
from dataclasses import dataclass, fields

from remorahal.protocol import encode_tag

log = logging.getLogger(__name__)

PRU_MPG = encode_tag("mpgd")
SYNC_BYTE = 0x5A

DEFAULT_ADDRESS = "10.10.10.10"
DEFAULT_PORT = 27182
DEFAULT_TIMEOUT = 50e-6

AXIS_COUNT = 6
MULTIPLIER_COUNT = 4

_FORMAT = struct.Struct("<ibb6ibbbibbbbbbbb12x")
PACKET_SIZE = _FORMAT.size


def _to_int(value, bits):
    """Truncate toward zero and wrap into a signed integer of the given width."""
    if not math.isfinite(value):
        raise ValueError(f"cannot convert {value!r} to an integer")
    span = 1 << bits
    wrapped = int(value) % span
    return wrapped - span if wrapped >= span // 2 else wrapped


def _to_float32(value):
    try:
        return struct.unpack("<f", struct.pack("<f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


@dataclass
class MpgPacket:
    """The 57-byte datagram sent to the pendant."""

    header: int = 0
    byte0: int = 0
    byte1: int = 0
    x_pos: int = 0
    y_pos: int = 0
    z_pos: int = 0
    a_pos: int = 0
    b_pos: int = 0
    c_pos: int = 0
    byte24: int = 0
    reset: int = 0
    byte26: int = 0
    spindle_rpm: int = 0
    spindle_on: int = 0
    feed_rate_override: int = 0
    slow_jog_rate: int = 0
    spindle_rate_override: int = 0
    spare35: int = 0
    parameter_select: int = 0
    axis_select: int = 0
    mpg_multiplier: int = 0

    def pack(self):
        """Return the packet as wire bytes."""
        values = [getattr(self, f.name) for f in fields(self)]
        try:
            return _FORMAT.pack(*values)
        except struct.error as exc:
            raise ValueError(f"packet field out of range: {exc}") from exc

    @classmethod
    def unpack(cls, data):
        """Build a packet from its wire bytes."""
        if len(data) != PACKET_SIZE:
            raise ValueError(f"packet must be {PACKET_SIZE} bytes, got {len(data)}")
        return cls(*_FORMAT.unpack(bytes(data)))


@dataclass
class MpgPins:
    """The component's pins: machine state in, axis selection and scale out."""

    update_freq: float = 0.0
    comms_status: bool = False
    x_pos: float = 0.0
    y_pos: float = 0.0
    z_pos: float = 0.0
    a_pos: float = 0.0
    b_pos: float = 0.0
    c_pos: float = 0.0
    reset: bool = False
    spindle_rpm: float = 0.0
    spindle_on: bool = False
    feed_override_counts: int = 0
    feed_override_scale: float = 0.0
    spindle_override_counts: int = 0
    spindle_override_scale: float = 0.0
    parameter_inc: bool = False
    axis_up: bool = False
    axis_down: bool = False
    multiplier_inc: bool = False
    x_select: bool = False
    y_select: bool = False
    z_select: bool = False
    a_select: bool = False
    b_select: bool = False
    c_select: bool = False
    mpg_x1_inc: float = 0.0
    mpg_scale: float = 0.0


_AXES = ("x", "y", "z", "a", "b", "c")


class Nvmpg:
    """Periodic update logic of the pendant driver.

    ``send`` is called with the packet bytes whenever a datagram goes out;
    with no ``send`` the packet is built but not transmitted.
    """

    def __init__(self, pins=None, send=None):
        self.pins = pins if pins is not None else MpgPins()
        self.send = send
        self.packet = MpgPacket()
        self.update_counter = 0
        self.update_flag = False
        self.selected_axis = 0
        self.selected_multiplier = 0
        self._old_pos = {axis: 0.0 for axis in _AXES}
        self._feed_counts_old = 0
        self._spindle_counts_old = 0
        self._button_state = [False, False, False]

        self.pins.x_select = True
        self.pins.mpg_scale = 1 * self.pins.mpg_x1_inc

    def _select_axis(self):
        for index, axis in enumerate(_AXES):
            setattr(self.pins, f"{axis}_select", index == self.selected_axis)

    def _refresh(self):
        pins = self.pins
        packet = self.packet

        for axis in _AXES:
            value = getattr(pins, f"{axis}_pos")
            if value != self._old_pos[axis]:
                self._old_pos[axis] = _to_float32(value)
                setattr(packet, f"{axis}_pos", _to_int(value * 1000, 32))
                self.update_flag = True

        if pins.spindle_rpm != packet.spindle_rpm:
            packet.spindle_rpm = _to_int(pins.spindle_rpm, 32)
            self.update_flag = True

        if int(pins.spindle_on) != packet.spindle_on:
            packet.spindle_on = _to_int(int(pins.spindle_on), 8)
            self.update_flag = True

        if pins.feed_override_counts != self._feed_counts_old:
            self._feed_counts_old = pins.feed_override_counts
            packet.feed_rate_override = _to_int(
                pins.feed_override_counts * pins.feed_override_scale, 8
            )
            self.update_flag = True

        if pins.spindle_override_counts != self._spindle_counts_old:
            self._spindle_counts_old = pins.spindle_override_counts
            packet.spindle_rate_override = _to_int(
                pins.spindle_override_counts * pins.spindle_override_scale, 8
            )
            self.update_flag = True

        up, down = bool(pins.axis_up), bool(pins.axis_down)
        if up != self._button_state[0] or down != self._button_state[1]:
            self._button_state[0] = up
            self._button_state[1] = down
            if up:
                self.selected_axis -= 1
            elif down:
                self.selected_axis += 1
            if self.selected_axis > AXIS_COUNT - 1:
                self.selected_axis = 0
            if self.selected_axis < 0:
                self.selected_axis = AXIS_COUNT - 1
            packet.axis_select = self.selected_axis
            self._select_axis()
            self.update_flag = True

        mult = bool(pins.multiplier_inc)
        if mult != self._button_state[2]:
            self._button_state[2] = mult
            if mult:
                self.selected_multiplier += 1
                if self.selected_multiplier > MULTIPLIER_COUNT - 1:
                    self.selected_multiplier = 0
                packet.mpg_multiplier = self.selected_multiplier
                pins.mpg_scale = 10**self.selected_multiplier * pins.mpg_x1_inc
                self.update_flag = True

    def update(self, period):
        """Run one thread cycle; period is in nanoseconds.

        Returns the bytes of the datagram sent this cycle, or None.
        """
        if period <= 0:
            raise ValueError("period must be positive")
        if self.pins.update_freq <= 0:
            raise ValueError("update_freq must be positive")
        recip_dt = 1.0 / (period * 1e-9)
        update_count = int(recip_dt / self.pins.update_freq)

        payload = None
        if self.update_counter >= update_count:
            self.update_counter = 0
            self._refresh()
            if self.update_flag and self.pins.comms_status:
                self.packet.header = PRU_MPG
                self.packet.byte0 = SYNC_BYTE
                self.packet.byte1 = SYNC_BYTE
                payload = self.packet.pack()
                if self.send is not None:
                    try:
                        self.send(payload)
                    except OSError as exc:
                        log.error("send (WRITE) failed: %s", exc)
                self.update_flag = False

        self.update_counter += 1
        return payload


def open_socket(
    address=DEFAULT_ADDRESS,
    port=DEFAULT_PORT,
    local_port=DEFAULT_PORT,
    timeout=DEFAULT_TIMEOUT,
):
    """Open a UDP socket bound to local_port and connected to address:port."""
    sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM, socket.IPPROTO_UDP)
    try:
        sock.bind(("", local_port))
        sock.connect((address, port))
        sock.settimeout(timeout)
    except OSError:
        sock.close()
        raise
    return sock