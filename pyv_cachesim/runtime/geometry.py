from __future__ import annotations
from dataclasses import dataclass, field

from .errors import InvalidGeometry


def is_power_of_two(n: int) -> bool:
    return (n > 0) and (n & (n - 1) == 0)


@dataclass(frozen=True)
class CacheGeometry:
    """Shape of a set-associative cache: L bytes per line, N sets, K ways."""
    line_size: int = 16
    num_sets: int = 8
    associativity: int = 1
    address_bits: int = 16

    # Derived properties
    offset_bits: int = field(init=False)
    set_bits: int = field(init=False)
    tag_bits: int = field(init=False)

    def __post_init__(self):
        if not is_power_of_two(self.line_size):
            raise InvalidGeometry(f"Line size must be a power of two, got {self.line_size}.")
        if not is_power_of_two(self.num_sets):
            raise InvalidGeometry(f"Number of sets must be a power of two, got {self.num_sets}.")
        if self.associativity < 1:
            raise InvalidGeometry(f"Associativity must be at least 1, got {self.associativity}.")

        offset_bits = self.line_size.bit_length() - 1
        set_bits = self.num_sets.bit_length() - 1
        if offset_bits + set_bits > self.address_bits:
            raise InvalidGeometry(
                f"Offset ({offset_bits} bits) and set index ({set_bits} bits) "
                f"do not fit a {self.address_bits}-bit address."
            )

        # frozen dataclass: derived fields go through object.__setattr__
        object.__setattr__(self, "offset_bits", offset_bits)
        object.__setattr__(self, "set_bits", set_bits)
        object.__setattr__(self, "tag_bits", self.address_bits - set_bits - offset_bits)

    @property
    def capacity_bytes(self) -> int:
        return self.line_size * self.num_sets * self.associativity

    @property
    def num_lines(self) -> int:
        return self.num_sets * self.associativity

    def describe(self) -> str:
        """Human readable label, e.g. '128 byte 2-way set associative cache with 16 bytes per line'."""
        if self.associativity == 1:
            kind = "1-way cache"
            suffix = " (direct mapped)"
        elif self.num_sets == 1:
            kind = f"{self.associativity}-way associative cache"
            suffix = " (fully associative)"
        else:
            kind = f"{self.associativity}-way set associative cache"
            suffix = ""
        return f"{self.capacity_bytes} byte {kind} with {self.line_size} bytes per line{suffix}"

    def to_dict(self) -> dict:
        return {
            "line_size": self.line_size,
            "num_sets": self.num_sets,
            "associativity": self.associativity,
            "address_bits": self.address_bits,
            "offset_bits": self.offset_bits,
            "set_bits": self.set_bits,
            "tag_bits": self.tag_bits,
            "capacity_bytes": self.capacity_bytes,
        }
