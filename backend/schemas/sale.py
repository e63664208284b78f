# backend/schemas/sale.py
from pydantic import BaseModel, ConfigDict


class SaleOut(BaseModel):
    id: int
    product_id: int
    quantity_sold: int
    total_price: int
    date_time: str
    payment_mode: str

    model_config = ConfigDict(from_attributes=True)


# Totals over every recorded sale
class SalesSummary(BaseModel):
    total_transactions: int
    total_revenue: int
