"""Cyclic redundancy check over bit sequences by modulo-2 long division."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Sequence


def _bits(value: str | Iterable[int], name: str) -> list[int]:
    bits = [int(ch) for ch in value] if isinstance(value, str) else list(value)
    if not bits:
        raise ValueError(f"{name} must not be empty")
    if any(bit not in (0, 1) for bit in bits):
        raise ValueError(f"{name} must consist of 0 and 1 bits")
    return bits


def _generator(value: str | Iterable[int]) -> list[int]:
    bits = _bits(value, "generator")
    if bits[0] != 1:
        raise ValueError("generator must start with a 1 bit")
    return bits


def _divide(bits: Sequence[int], generator: Sequence[int], steps: int) -> list[int]:
    work = list(bits)
    for start in range(steps):
        if work[start]:
            for offset, bit in enumerate(generator):
                work[start + offset] ^= bit
    return work


def crc_remainder(frame: str | Iterable[int], generator: str | Iterable[int]) -> list[int]:
    """Return the CRC bits of ``frame`` for ``generator`` (len(generator) - 1 bits)."""
    data = _bits(frame, "frame")
    divisor = _generator(generator)
    degree = len(divisor) - 1
    work = _divide(data + [0] * degree, divisor, len(data))
    return work[len(data) :]


def encode(frame: str | Iterable[int], generator: str | Iterable[int]) -> list[int]:
    """Return ``frame`` followed by its CRC bits."""
    data = _bits(frame, "frame")
    return data + crc_remainder(data, generator)


def _received_remainder(
    received: str | Iterable[int], generator: str | Iterable[int]
) -> list[int]:
    bits = _bits(received, "received frame")
    divisor = _generator(generator)
    degree = len(divisor) - 1
    if len(bits) <= degree:
        raise ValueError("received frame is shorter than the check bits")
    steps = len(bits) - degree
    return _divide(bits, divisor, steps)[steps:]


def verify(received: str | Iterable[int], generator: str | Iterable[int]) -> bool:
    """Report whether ``received`` (data plus CRC bits) divides evenly by ``generator``."""
    return not any(_received_remainder(received, generator))


def _show(bits: Iterable[int]) -> str:
    return "".join(str(bit) for bit in bits)


def main(argv: Sequence[str] | None = None) -> int:
    """Compute the CRC of a frame and check a received frame against it."""
    parser = argparse.ArgumentParser(description="Cyclic redundancy check of a bit frame.")
    parser.add_argument("frame", help="data bits, e.g. 1101011011")
    parser.add_argument("generator", help="generator bits, e.g. 10011")
    parser.add_argument(
        "received", nargs="?", help="received frame; defaults to the transmitted frame"
    )
    args = parser.parse_args(argv)

    try:
        frame = _bits(args.frame, "frame")
        generator = _generator(args.generator)
        crc = crc_remainder(frame, generator)
        transmitted = frame + crc
        received = _bits(args.received, "received frame") if args.received else transmitted
        remainder = _received_remainder(received, generator)
    except ValueError as error:
        parser.error(str(error))

    print("Sender side:")
    print(f"Frame: {_show(frame)}")
    print(f"Generator: {_show(generator)}")
    print(f"Number of 0's to be appended: {len(generator) - 1}")
    print(f"Message after appending 0's: {_show(frame + [0] * (len(generator) - 1))}")
    print(f"CRC bits: {_show(crc)}")
    print(f"Transmitted Frame: {_show(transmitted)}")
    print("Receiver side:")
    print(f"Received Frame: {_show(received)}")
    print(f"Remainder: {_show(remainder)}")
    if any(remainder):
        print("Message transmitted from sender to receiver is incorrect")
        return 1
    print("Message transmitted from sender to receiver is correct")
    return 0