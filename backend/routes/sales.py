# backend/routes/sales.py
from typing import List
import io
import logging

from fastapi import APIRouter, Depends, HTTPException, Path
from fastapi.responses import StreamingResponse
from sqlalchemy import func
from sqlalchemy.orm import Session

from database import get_db
from models.sale import Sale
from schemas.product import MAX_SQL_INT
from schemas.sale import SaleOut, SalesSummary
from utils.pdf import generate_receipt_pdf, receipt_filename

router = APIRouter(prefix="/api", tags=["Sales"])
logger = logging.getLogger(__name__)


@router.get("/sales", response_model=List[SaleOut])
def list_sales(db: Session = Depends(get_db)):
    return db.query(Sale).order_by(Sale.id).all()


@router.get("/sales-summary", response_model=SalesSummary)
def get_sales_summary(db: Session = Depends(get_db)):
    total_transactions, total_revenue = db.query(
        func.count(Sale.id),
        func.coalesce(func.sum(Sale.total_price), 0),
    ).one()

    return SalesSummary(
        total_transactions=total_transactions or 0,
        total_revenue=total_revenue or 0,
    )


@router.get("/sales/receipt/{sale_id}")
def download_receipt(
    sale_id: int = Path(..., ge=1, le=MAX_SQL_INT),
    db: Session = Depends(get_db),
):
    # Render the receipt in memory and stream it as a download
    sale = db.query(Sale).filter(Sale.id == sale_id).first()
    if not sale:
        raise HTTPException(status_code=404, detail="Sale not found")

    pdf_bytes = generate_receipt_pdf(sale)
    filename = receipt_filename(sale.id)
    logger.info("Receipt generated for sale %s (%s bytes)", sale.id, len(pdf_bytes))

    return StreamingResponse(
        io.BytesIO(pdf_bytes),
        media_type="application/pdf",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
