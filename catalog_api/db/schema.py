# catalog_api/db/schema.py

from sqlalchemy import MetaData, Table, Column, Integer, String, Float

metadata = MetaData()

products = Table(
    "products",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", String, nullable=False),
    Column("price", Float, nullable=False),
)
