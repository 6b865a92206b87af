"""
Data models for the Region Gallery application.
"""
from dataclasses import dataclass, field
from typing import List


@dataclass
class Region:
    """A named geographic bucket of images, read from the region store."""
    name: str
    latitude: float
    longitude: float

    @classmethod
    def from_row(cls, row) -> 'Region':
        """
        Create from a `SELECT *` row of the region table.

        Columns are read by position (name, lat, long).
        """
        name, lat, lng = row[0], row[1], row[2]
        return cls(name=name, latitude=float(lat), longitude=float(lng))

    def to_dict(self) -> dict:
        """Convert to the coordinate mapping used by the regions API."""
        return {
            "Lat": self.latitude,
            "Long": self.longitude
        }


@dataclass
class ImagePage:
    """One page of a region's image listing."""
    images: List[str] = field(default_factory=list)
    has_more: bool = False

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON response."""
        return {
            "images": list(self.images),
            "has_more": self.has_more
        }
