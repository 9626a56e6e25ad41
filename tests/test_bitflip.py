import io
import sys

import pytest

from lessonkit import bitflip
from lessonkit.bitflip import process_file, reverse_bits, transform


def test_reverse_bits_known_values():
    assert reverse_bits(1) == 128
    assert reverse_bits(0) == 0
    assert reverse_bits(255) == 255


def test_reverse_bits_is_involution():
    assert all(reverse_bits(reverse_bits(value)) == value for value in range(256))


def test_reverse_bits_keeps_bit_count():
    assert all(
        bin(reverse_bits(value)).count("1") == bin(value).count("1") for value in range(256)
    )


def test_reverse_bits_is_bijection():
    assert sorted(reverse_bits(value) for value in range(256)) == list(range(256))


@pytest.mark.parametrize("value", [-1, 256, 1000])
def test_reverse_bits_rejects_out_of_range(value):
    with pytest.raises(ValueError):
        reverse_bits(value)


def test_transform_empty():
    assert transform(b"") == b""


def test_transform_reverses_order_and_bits():
    assert transform(bytes([1, 2])) == bytes([reverse_bits(2), reverse_bits(1)])


@pytest.mark.parametrize("data", [b"a", b"hello world", bytes(range(256))])
def test_transform_is_involution(data):
    assert transform(transform(data)) == data


@pytest.mark.parametrize("data", [b"\x01\x80\x7f", b"abcdef", bytes(range(0, 256, 7))])
def test_transform_reverses_whole_bit_string(data):
    width = 8 * len(data)
    original = format(int.from_bytes(data, "big"), f"0{width}b")
    flipped = format(int.from_bytes(transform(data), "big"), f"0{width}b")
    assert flipped == original[::-1]


def test_transform_accepts_bytearray():
    assert transform(bytearray(b"xyz")) == transform(b"xyz")


def test_process_file_rewrites_in_place(tmp_path):
    target = tmp_path / "data.bin"
    original = b"some binary \x00\xff content"
    target.write_bytes(original)
    result = process_file(target)
    assert result == transform(original)
    assert target.read_bytes() == result
    process_file(str(target))
    assert target.read_bytes() == original


def test_process_file_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        process_file(tmp_path / "missing.bin")


def test_main_with_argument(tmp_path):
    target = tmp_path / "file.bin"
    target.write_bytes(b"\x01\x02\x03")
    assert bitflip.main([str(target)]) == 0
    assert target.read_bytes() == transform(b"\x01\x02\x03")


def test_main_prompts_for_name(tmp_path, monkeypatch, capsys):
    target = tmp_path / "prompted.bin"
    target.write_bytes(b"prompt")
    monkeypatch.setattr(sys, "stdin", io.StringIO(f"{target}\n"))
    assert bitflip.main([]) == 0
    assert bitflip.PROMPT in capsys.readouterr().out
    assert target.read_bytes() == transform(b"prompt")


def test_main_missing_file(tmp_path, capsys):
    assert bitflip.main([str(tmp_path / "nope.bin")]) == 1
    assert "File is not found..." in capsys.readouterr().out


def test_main_directory_is_read_error(tmp_path, capsys):
    assert bitflip.main([str(tmp_path)]) == 1
    assert "Something went wrong..." in capsys.readouterr().out