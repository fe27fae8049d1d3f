# catalog_api/db/products.py

import logging
from typing import List

from sqlalchemy import select
from sqlalchemy.engine import Engine

from catalog_api.db.schema import products
from catalog_api.models.products import ProductOut

logger = logging.getLogger(__name__)


class ProductRepository:
    """
    Read access to the products table.

    Only listing is supported; rows are written by whatever
    administrative process owns the store.
    """

    def __init__(self, engine: Engine):
        self.engine = engine

    def list_all(self) -> List[ProductOut]:
        """
        Return every product row in the store's default scan order.
        """
        with self.engine.connect() as conn:
            stmt = select(
                products.c.id,
                products.c.name,
                products.c.price,
            )

            rows = conn.execute(stmt).mappings().all()

        logger.debug("Fetched %d product rows", len(rows))

        return [
            ProductOut(
                id=row["id"],
                name=row["name"],
                price=row["price"],
            )
            for row in rows
        ]
