import pytest

from remorahal.boards import Board, detect_board, parse_compatible, read_compatible

RPI5 = b"raspberrypi,5-model-b\0brcm,bcm2712\0"


def test_parse_compatible_splits_on_nul():
    assert parse_compatible(RPI5) == ["raspberrypi,5-model-b", "brcm,bcm2712"]


def test_parse_compatible_accepts_text():
    assert parse_compatible("raspberrypi,400\0\0brcm,bcm2711\0") == [
        "raspberrypi,400",
        "brcm,bcm2711",
    ]


def test_parse_empty():
    assert parse_compatible(b"") == []


def test_detect_rpi5():
    board = detect_board(RPI5)
    assert board == Board(model="5-model-b", soc="bcm2712")
    assert board.compatible == "raspberrypi,5-model-b"
    assert board.supported


def test_detect_exact_model_not_prefix():
    board = detect_board(b"raspberrypi,3-model-b-plus\0brcm,bcm2837\0")
    assert board.model == "3-model-b-plus"


def test_detect_soc_from_model_when_missing():
    board = detect_board(b"raspberrypi,4-model-b\0")
    assert board.soc == "bcm2711"


def test_old_board_not_supported():
    board = detect_board(b"raspberrypi,model-b-rev2\0brcm,bcm2835\0")
    assert board.model == "model-b-rev2"
    assert board.soc == "bcm2835"
    assert not board.supported


@pytest.mark.parametrize(
    "data", [b"", b"brcm,bcm2712\0", b"raspberrypi,6-model-z\0", b"other,5-model-b\0"]
)
def test_detect_unknown_returns_none(data):
    assert detect_board(data) is None


def test_read_compatible(tmp_path):
    path = tmp_path / "compatible"
    path.write_bytes(RPI5)
    assert read_compatible(path) == ["raspberrypi,5-model-b", "brcm,bcm2712"]


def test_read_compatible_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_compatible(tmp_path / "missing")