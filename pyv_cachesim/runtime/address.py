from __future__ import annotations
from .geometry import CacheGeometry

class AddressDecoder:
    """Splits a memory address into tag, set index and offset for a given geometry."""

    def __init__(self, geometry: CacheGeometry):
        self.address_bits = geometry.address_bits
        self.offset_bits = geometry.offset_bits
        self.set_bits = geometry.set_bits

        self.offset_mask = (1 << self.offset_bits) - 1
        self.set_mask = (1 << self.set_bits) - 1
        self.address_limit = 1 << self.address_bits

    def decode(self, address: int) -> tuple[int, int, int]:
        """Returns (tag, set_index, offset)."""
        if not 0 <= address < self.address_limit:
            raise ValueError(
                f"Address {address:#x} is outside the {self.address_bits}-bit address space."
            )
        offset = address & self.offset_mask
        set_index = (address >> self.offset_bits) & self.set_mask
        tag = address >> (self.offset_bits + self.set_bits)
        return tag, set_index, offset

    def line_address(self, tag: int, set_index: int) -> int:
        """Reconstructs the line start address from tag and set index."""
        return (tag << (self.set_bits + self.offset_bits)) | (set_index << self.offset_bits)
