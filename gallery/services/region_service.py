"""
Region service for allow-list checks against the region store.
"""
import logging
from typing import List

from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from ..models.region import Region
from ..exceptions import QueryError

logger = logging.getLogger(__name__)


class RegionService:
    """Service for reading regions from the relational store."""

    def __init__(self, engine: Engine, table_name: str = "region"):
        """
        Initialize region service.

        Args:
            engine: SQLAlchemy engine for the region store
            table_name: Table holding one row per allowed region
        """
        self.engine = engine
        self.table_name = table_name

    def is_allowed(self, name: str) -> bool:
        """
        Check whether a region exists in the store.

        Every call queries the store. A failed query denies access.

        Args:
            name: Lowercased region name

        Returns:
            bool: True iff a row with exactly this name exists
        """
        query = text(f"SELECT * FROM {self.table_name} WHERE name = :name")
        try:
            with self.engine.connect() as connection:
                row = connection.execute(query, {"name": name}).first()
        except Exception as e:
            logger.error(f"Region lookup failed for {name!r}: {e}")
            return False

        return row is not None

    def list_regions(self) -> List[Region]:
        """
        Load every region in the store.

        Returns:
            list: Region objects in the order the store returns them

        Raises:
            QueryError: If the store cannot be queried or a row cannot be read
        """
        query = text(f"SELECT * FROM {self.table_name}")
        try:
            with self.engine.connect() as connection:
                rows = connection.execute(query).fetchall()
            return [Region.from_row(row) for row in rows]
        except (SQLAlchemyError, IndexError, TypeError, ValueError) as e:
            logger.error(f"Failed to load regions: {e}")
            raise QueryError("Failed to load regions")
