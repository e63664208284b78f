# backend/routes/products.py
from typing import List, Optional
import logging

from fastapi import APIRouter, Depends, Path, Query
from sqlalchemy.orm import Session

from config import settings
from database import get_db
from models.product import Product
import schemas.product as product_schemas

router = APIRouter(prefix="/api", tags=["Products"])
logger = logging.getLogger(__name__)


@router.get("/products", response_model=List[product_schemas.ProductOut])
def list_products(
    search: Optional[str] = Query(None, description="Filtruj po nazwie"),
    db: Session = Depends(get_db),
):
    query = db.query(Product)
    if search:
        # Literal substring match, % and _ in the term are not wildcards
        query = query.filter(Product.name.icontains(search, autoescape=True))
    return query.order_by(Product.id).all()


@router.post("/products", response_model=product_schemas.ProductCreated)
def create_product(payload: product_schemas.ProductCreate, db: Session = Depends(get_db)):
    product = Product(**payload.model_dump())
    db.add(product)
    db.commit()
    db.refresh(product)

    logger.info("Product created: id=%s name=%r", product.id, product.name)
    return {"id": product.id}


# Full replace; an unknown id is reported as 0 updated rows
@router.put("/products/{product_id}", response_model=product_schemas.ProductUpdated)
def update_product(
    payload: product_schemas.ProductUpdate,
    product_id: int = Path(..., ge=1, le=product_schemas.MAX_SQL_INT),
    db: Session = Depends(get_db),
):
    updated = (
        db.query(Product)
        .filter(Product.id == product_id)
        .update(payload.model_dump(), synchronize_session=False)
    )
    db.commit()

    logger.info("Product %s updated (%s rows)", product_id, updated)
    return {"updated": updated}


@router.delete("/products/{product_id}", response_model=product_schemas.ProductDeleted)
def delete_product(
    product_id: int = Path(..., ge=1, le=product_schemas.MAX_SQL_INT),
    db: Session = Depends(get_db),
):
    deleted = (
        db.query(Product)
        .filter(Product.id == product_id)
        .delete(synchronize_session=False)
    )
    db.commit()

    logger.info("Product %s deleted (%s rows)", product_id, deleted)
    return {"deleted": deleted}


@router.get("/low-stock", response_model=List[product_schemas.ProductOut])
def list_low_stock(db: Session = Depends(get_db)):
    """Products at or below the low stock threshold."""
    return (
        db.query(Product)
        .filter(Product.quantity <= settings.LOW_STOCK_THRESHOLD)
        .order_by(Product.quantity, Product.id)
        .all()
    )
