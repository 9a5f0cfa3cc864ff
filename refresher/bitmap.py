"""A fixed-size bitmap stored in bytes, least significant bit first."""

from __future__ import annotations


class Bitmap:
    """A zero-initialised set of ``n_bits`` bits."""

    def __init__(self, n_bits: int) -> None:
        if n_bits <= 0:
            raise ValueError("a bitmap needs at least one bit")
        self.bit_count = n_bits
        self.byte_count = (n_bits + 7) // 8
        self.data = bytearray(self.byte_count)

    def __len__(self) -> int:
        return self.bit_count

    def __repr__(self) -> str:
        return f"Bitmap(bit_count={self.bit_count}, data={bytes(self.data)!r})"

    def _locate(self, bit: int) -> tuple[int, int]:
        if not 0 <= bit < self.bit_count:
            raise IndexError(f"bit {bit} is outside a bitmap of {self.bit_count} bits")
        return bit // 8, 1 << (bit % 8)

    def set(self, bit: int) -> None:
        """Set ``bit`` to one."""
        index, mask = self._locate(bit)
        self.data[index] |= mask

    def reset(self, bit: int) -> None:
        """Clear ``bit`` to zero."""
        index, mask = self._locate(bit)
        self.data[index] &= ~mask & 0xFF

    def test(self, bit: int) -> bool:
        """Return whether ``bit`` is set."""
        index, mask = self._locate(bit)
        return bool(self.data[index] & mask)

    def _bits(self):
        return (
            (bit, bool(self.data[bit // 8] & (1 << (bit % 8))))
            for bit in range(self.bit_count)
        )

    def ffs(self) -> int | None:
        """Return the first set bit, or ``None`` if no bit is set."""
        return next((bit for bit, value in self._bits() if value), None)

    def ffz(self) -> int | None:
        """Return the first clear bit, or ``None`` if every bit is set."""
        return next((bit for bit, value in self._bits() if not value), None)