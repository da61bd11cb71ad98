"""
Byte count wrapper with unit conversions.
"""

from configuration import UNIT_BASE


class ByteCount(int):
    """An integer count of bytes.

    Conversions divide by ``base`` at every step, so the same value can be
    shown in binary units (base 1024: KiB, MiB, GiB) or decimal units
    (base 1000: kB, MB, GB). One report should stick to one base.
    """

    __slots__ = ()

    def kib(self, base: int = UNIT_BASE) -> float:
        return int(self) / base

    def mib(self, base: int = UNIT_BASE) -> float:
        return self.kib(base) / base

    def gib(self, base: int = UNIT_BASE) -> float:
        return self.mib(base) / base

    def __repr__(self):
        return f"ByteCount({int(self)})"
