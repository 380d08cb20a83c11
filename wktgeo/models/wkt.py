from typing import Iterator, List, Optional
from dataclasses import dataclass, field

from wktgeo.models.geometries import Geometry
from wktgeo.models.wkt_options import WktOptions


@dataclass
class Wkt:
    """
    Top-level container for the geometries read from one WKT string

    A parse call yields at most one item; an empty input yields none.
    """
    items: List[Geometry] = field(default_factory=list)

    @classmethod
    def from_str(cls, wkt_str: str, options: Optional[WktOptions] = None) -> "Wkt":
        """
        Parse a WKT string

        Args:
            wkt_str: WKT text
            options: Pipeline options (default: float coordinates)

        Returns:
            Wkt container holding zero or one geometry

        Raises:
            WktException: If the text is not valid WKT
        """
        from wktgeo.components.parser import WktParser

        return WktParser(options).parse(wkt_str)

    def add_item(self, item: Geometry) -> None:
        """Append a geometry"""
        self.items.append(item)

    def first(self) -> Optional[Geometry]:
        """Get first geometry (the only one for parsed text), None if empty"""
        return self.items[0] if self.items else None

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Geometry]:
        return iter(self.items)
