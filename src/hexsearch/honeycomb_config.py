"""Loader for honeycomb files."""

from dataclasses import dataclass
from os import PathLike
from pathlib import Path

from hexsearch.honeycomb import validate_rings


@dataclass
class HoneycombConfig:
    """A honeycomb puzzle as read from disk."""

    name: str
    """Name of the puzzle (the file stem when loaded from a file)."""

    rings: tuple[str, ...]
    """One string of uppercase letters per ring, ring 0 first."""

    def __post_init__(self) -> None:
        """Validate the rings."""
        self.rings = tuple(self.rings)
        validate_rings(self.rings)

    def __str__(self) -> str:
        """Return a string representation of the HoneycombConfig."""
        return f"{self.name} ({len(self.rings)} rings, {self.cell_count} cells)"

    @property
    def cell_count(self) -> int:
        return sum(len(ring) for ring in self.rings)

    def to_dict(self) -> dict:
        """Return a dictionary representation of the HoneycombConfig for serialization.

        This is useful for supplying the honeycomb to child processes via
        `multiprocessing`, which requires arguments to be pickleable.
        """
        return {
            "name": self.name,
            "rings": list(self.rings),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "HoneycombConfig":
        """Create a HoneycombConfig instance from a dictionary representation."""
        return cls(name=data["name"], rings=tuple(data["rings"]))


def clean(ring_str: str) -> str:
    """Clean a ring string by removing whitespace and converting all letters to uppercase."""
    return "".join(ring_str.split()).upper()


def load_honeycomb(honeycomb_path: PathLike | str) -> HoneycombConfig:
    """Load a honeycomb file from the given path.

    The first line holds the number of rings.  Each following non-blank line is one ring,
    starting with the center.

    Args:
        honeycomb_path: Path to the honeycomb file.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the ring count line is invalid or does not match the rings read.
        HoneycombError: If the rings do not form a valid honeycomb.
    """
    path = Path(honeycomb_path)
    if not path.is_file():
        raise FileNotFoundError(f"Honeycomb file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        # Get the ring count from the first line
        first_line = f.readline().strip()
        try:
            ring_count = int(first_line)
        except ValueError:
            raise ValueError(f"Invalid ring count line: '{first_line}'") from None
        if ring_count < 0:
            raise ValueError(f"Invalid ring count line: '{first_line}'")

        rings = [clean(line) for line in f if line.strip()]

    if len(rings) != ring_count:
        raise ValueError(
            f"Honeycomb file declares {ring_count} rings but contains {len(rings)}."
        )

    return HoneycombConfig(name=path.stem, rings=tuple(rings))
