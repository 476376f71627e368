import pytest

from remorahal.encoder import (
    DEFAULT_NUM_ENCODER,
    MAX_ENCODER,
    Encoder,
    EncoderBank,
    encoder_names,
)

PERIOD = 1_000_000


def test_default_names():
    names = encoder_names()
    assert len(names) == DEFAULT_NUM_ENCODER
    assert names[0] == "encoder.0"


def test_counted_names():
    assert encoder_names(2) == ["encoder.0", "encoder.1"]


def test_explicit_names_stop_at_empty():
    assert encoder_names(0, ["spindle", "x", "", "y"]) == ["spindle", "x"]


def test_names_mutually_exclusive():
    with pytest.raises(ValueError):
        encoder_names(2, ["spindle"])


def test_too_many_encoders():
    with pytest.raises(ValueError):
        encoder_names(MAX_ENCODER + 1)


def test_negative_count_rejected():
    with pytest.raises(ValueError):
        encoder_names(-1)


def test_explicit_names_capped_at_max():
    names = [f"e{i}" for i in range(MAX_ENCODER + 4)]
    assert encoder_names(0, names) == names[:MAX_ENCODER]


def test_position_is_scaled():
    enc = Encoder(raw_count=100.0, position_scale=4.0)
    assert enc.capture(PERIOD) == pytest.approx(100.0 / 4.0)
    assert enc.position == pytest.approx(enc.count / 4.0)


def test_unset_scale_gives_zero_position():
    enc = Encoder(raw_count=100.0)
    enc.capture(PERIOD)
    assert enc.position == 0.0
    assert enc.count == 100.0


def test_tiny_scale_replaced_with_unity():
    enc = Encoder(raw_count=50.0, position_scale=1e-30)
    enc.capture(PERIOD)
    assert enc.position_scale == 1.0
    assert enc.position == pytest.approx(50.0)


def test_velocity_from_position_change():
    enc = Encoder(position_scale=2.0)
    enc.capture(PERIOD)
    enc.raw_count = 40.0
    enc.capture(PERIOD)
    assert enc.velocity == pytest.approx(enc.position / (PERIOD * 1e-9))


def test_reset_zeroes_count():
    enc = Encoder(raw_count=30.0, position_scale=1.0)
    enc.capture(PERIOD)
    enc.reset = True
    enc.capture(PERIOD)
    assert enc.count == 0.0
    assert enc.raw_count == 30.0
    enc.reset = False
    enc.raw_count = 35.0
    enc.capture(PERIOD)
    assert enc.count == pytest.approx(35.0 - 30.0)


def test_index_latches_and_clears_enable():
    enc = Encoder(raw_count=12.0, position_scale=1.0, index_enable=True)
    enc.capture(PERIOD)
    assert enc.index_enable is True
    enc.phase_z = True
    enc.capture(PERIOD)
    assert enc.index_enable is False
    assert enc.index_count == 12.0
    assert enc.position == 0.0


def test_index_ignored_without_enable():
    enc = Encoder(raw_count=12.0, position_scale=1.0, phase_z=True)
    enc.capture(PERIOD)
    assert enc.index_count == 0.0
    assert enc.count == 12.0


def test_nonpositive_period_rejected():
    with pytest.raises(ValueError):
        Encoder().capture(0)


def test_bank_captures_all():
    bank = EncoderBank(0, ["a", "b"])
    assert len(bank) == 2
    bank["a"].raw_count = 10.0
    bank["a"].position_scale = 1.0
    bank["b"].raw_count = 20.0
    bank["b"].position_scale = 2.0
    result = bank.capture(PERIOD)
    assert result == {"a": pytest.approx(10.0), "b": pytest.approx(20.0 / 2.0)}
    assert [enc.position for enc in bank] == [result["a"], result["b"]]


def test_bank_default_size():
    assert len(EncoderBank()) == DEFAULT_NUM_ENCODER