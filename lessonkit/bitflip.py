"""Reverse a file end to end at the bit level, in place."""

import sys
from pathlib import Path

PROMPT = "Enter file name (if file is somewhere out this folder, please, enter the path): "

_REVERSED = bytes(int(f"{value:08b}"[::-1], 2) for value in range(256))


def reverse_bits(value):
    """Return the byte value with its eight bits in reverse order."""
    if not 0 <= value <= 255:
        raise ValueError(f"{value} is not a byte value")
    return _REVERSED[value]


def transform(data):
    """Reverse the byte order and the bits of every byte."""
    return bytes(data)[::-1].translate(_REVERSED)


def process_file(path):
    """Transform the file's contents in place and return the new contents."""
    path = Path(path)
    result = transform(path.read_bytes())
    path.write_bytes(result)
    return result


def main(argv=None):
    """Transform the file named in argv, or ask for its name."""
    args = sys.argv[1:] if argv is None else list(argv)
    if args:
        name = args[0]
    else:
        print(PROMPT, end="", flush=True)
        name = sys.stdin.readline().rstrip("\r\n")

    path = Path(name)
    try:
        data = path.read_bytes()
    except FileNotFoundError:
        print("File is not found...")
        return 1
    except OSError:
        print("Something went wrong...\nMaybe memory error")
        return 1

    try:
        path.write_bytes(transform(data))
    except OSError:
        print("Error...\nCannot write file...")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())