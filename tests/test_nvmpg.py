import socket

import pytest

from remorahal.nvmpg import (
    PACKET_SIZE,
    PRU_MPG,
    MpgPacket,
    MpgPins,
    Nvmpg,
    open_socket,
)

PERIOD = 1_000_000


def make_driver(**pin_values):
    values = {"update_freq": 1e9, "comms_status": True, "mpg_x1_inc": 0.001}
    values.update(pin_values)
    sent = []
    driver = Nvmpg(MpgPins(**values), send=sent.append)
    return driver, sent


def test_packet_size_matches_format():
    assert PACKET_SIZE == 57
    assert len(MpgPacket().pack()) == PACKET_SIZE


def test_packet_round_trip():
    packet = MpgPacket(
        header=PRU_MPG,
        byte0=0x5A,
        byte1=0x5A,
        x_pos=-1234,
        c_pos=99999,
        spindle_rpm=12000,
        spindle_on=1,
        feed_rate_override=-7,
        axis_select=3,
        mpg_multiplier=2,
    )
    assert MpgPacket.unpack(packet.pack()) == packet


def test_unpack_rejects_wrong_length():
    with pytest.raises(ValueError):
        MpgPacket.unpack(b"\x00" * (PACKET_SIZE - 1))


def test_pack_rejects_out_of_range_field():
    with pytest.raises(ValueError):
        MpgPacket(axis_select=300).pack()


def test_initial_outputs():
    driver, _ = make_driver(mpg_x1_inc=0.01)
    assert driver.pins.x_select is True
    assert driver.pins.mpg_scale == 0.01


def test_header_and_sync_bytes_on_wire():
    driver, sent = make_driver(x_pos=1.5)
    payload = driver.update(PERIOD)
    assert sent == [payload]
    assert payload[:4] == PRU_MPG.to_bytes(4, "little")
    assert payload[4:6] == b"\x5a\x5a"


def test_position_scaled_by_thousand():
    driver, _ = make_driver(x_pos=1.5, z_pos=-2.25)
    packet = MpgPacket.unpack(driver.update(PERIOD))
    assert packet.x_pos == 1500
    assert packet.z_pos == -2250


def test_no_resend_without_change():
    driver, sent = make_driver(y_pos=3.0)
    driver.update(PERIOD)
    assert driver.update(PERIOD) is None
    assert len(sent) == 1


def test_pending_change_sent_when_comms_come_up():
    driver, sent = make_driver(comms_status=False, spindle_rpm=500.0)
    assert driver.update(PERIOD) is None
    assert sent == []
    driver.pins.comms_status = True
    payload = driver.update(PERIOD)
    assert MpgPacket.unpack(payload).spindle_rpm == 500


def test_axis_up_wraps_to_last_axis():
    driver, _ = make_driver(axis_up=True)
    packet = MpgPacket.unpack(driver.update(PERIOD))
    assert packet.axis_select == 5
    pins = driver.pins
    assert pins.c_select is True
    assert [pins.x_select, pins.y_select, pins.z_select, pins.a_select, pins.b_select] == [
        False
    ] * 5


def test_axis_down_then_release_keeps_selection():
    driver, _ = make_driver(axis_down=True)
    driver.update(PERIOD)
    assert driver.selected_axis == 1
    assert driver.pins.y_select is True and driver.pins.x_select is False
    driver.pins.axis_down = False
    driver.update(PERIOD)
    assert driver.selected_axis == 1
    assert driver.pins.y_select is True


def test_multiplier_cycles_scale():
    driver, _ = make_driver(mpg_x1_inc=0.5)
    scales = []
    for _ in range(4):
        driver.pins.multiplier_inc = True
        driver.update(PERIOD)
        scales.append(driver.pins.mpg_scale)
        driver.pins.multiplier_inc = False
        driver.update(PERIOD)
    assert scales == [5.0, 50.0, 500.0, 0.5]
    assert driver.packet.mpg_multiplier == 0


def test_feed_override_uses_counts_times_scale():
    driver, _ = make_driver(feed_override_counts=10, feed_override_scale=1.5)
    packet = MpgPacket.unpack(driver.update(PERIOD))
    assert packet.feed_rate_override == 15


def test_updates_throttled_by_update_freq():
    driver, _ = make_driver(update_freq=500.0, x_pos=1.0)
    results = [driver.update(PERIOD) for _ in range(3)]
    assert results[0] is None and results[1] is None
    assert MpgPacket.unpack(results[2]).x_pos == 1000


def test_invalid_period_and_frequency():
    driver, _ = make_driver()
    with pytest.raises(ValueError):
        driver.update(0)
    driver.pins.update_freq = 0.0
    with pytest.raises(ValueError):
        driver.update(PERIOD)


def test_open_socket_delivers_datagram():
    peer = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    peer.bind(("127.0.0.1", 0))
    peer.settimeout(2.0)
    try:
        port = peer.getsockname()[1]
        with open_socket("127.0.0.1", port=port, local_port=0, timeout=1.0) as sock:
            driver = Nvmpg(
                MpgPins(update_freq=1e9, comms_status=True, b_pos=4.0), send=sock.send
            )
            payload = driver.update(PERIOD)
            received = peer.recv(1024)
        assert received == payload
        assert MpgPacket.unpack(received).b_pos == 4000
    finally:
        peer.close()