from typing import Any, Optional, Tuple
from dataclasses import dataclass


@dataclass(frozen=True)
class Coord:
    """
    A coordinate position

    z and m are reserved: the parser only ever reads x and y, so they stay None.
    The numeric type of x and y is whatever coord_type the pipeline was run with.
    """
    x: Any
    y: Any
    z: Optional[Any] = None
    m: Optional[Any] = None

    def to_tuple(self) -> Tuple[Any, Any]:
        """Get (x, y) tuple"""
        return (self.x, self.y)

    def __str__(self) -> str:
        return f"Coord({self.x}, {self.y})"
