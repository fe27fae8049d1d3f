# catalog_api/api/products.py

from typing import List

from fastapi import APIRouter, Depends

from catalog_api.db.engine import get_engine
from catalog_api.db.products import ProductRepository
from catalog_api.models.products import ProductOut

router = APIRouter(prefix="/products", tags=["products"])


def get_product_repository() -> ProductRepository:
    return ProductRepository(get_engine())


@router.get("", response_model=List[ProductOut])
def list_products(
    repository: ProductRepository = Depends(get_product_repository),
) -> List[ProductOut]:
    """
    Return all stored products.
    """
    return repository.list_all()
