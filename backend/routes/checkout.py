# backend/routes/checkout.py
from datetime import datetime, timezone
import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from database import get_db
from models.product import Product
from models.sale import Sale
from schemas.cart import CheckoutRequest, CheckoutResponse

router = APIRouter(prefix="/api", tags=["Checkout"])
logger = logging.getLogger(__name__)


def _now_iso() -> str:
    # e.g. 2026-10-19T12:00:00.000Z
    return datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%f")[:-3] + "Z"


@router.post("/checkout", response_model=CheckoutResponse)
def checkout(payload: CheckoutRequest, db: Session = Depends(get_db)):
    """
    Records a sale for every cart line and decrements stock.

    All lines share one timestamp and one transaction: if any line fails
    (unknown product, storage error) nothing from this checkout is kept.
    """
    now = _now_iso()

    try:
        for line in payload.cart:
            # Atomic in-SQL decrement, no floor check
            matched = (
                db.query(Product)
                .filter(Product.id == line.id)
                .update({Product.quantity: Product.quantity - line.quantity}, synchronize_session=False)
            )
            if not matched:
                raise HTTPException(status_code=404, detail=f"Product {line.id} not found")

            db.add(Sale(
                product_id=line.id,
                quantity_sold=line.quantity,
                total_price=line.price * line.quantity,
                date_time=now,
                payment_mode=payload.payment_mode,
            ))
        db.commit()
    except Exception:
        db.rollback()
        logger.warning("Checkout rolled back (%s lines)", len(payload.cart))
        raise

    logger.info("Checkout complete: %s lines, payment_mode=%s", len(payload.cart), payload.payment_mode)
    return {"message": "Checkout complete"}
