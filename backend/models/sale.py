# backend/models/sale.py
from sqlalchemy import Column, Integer, String
from database import Base

# One sold cart line. Rows are written by checkout only and never updated.
class Sale(Base):
    __tablename__ = "sales"

    id = Column(Integer, primary_key=True, index=True)
    # Plain reference, products may be deleted after the sale
    product_id = Column(Integer, index=True, nullable=False)
    quantity_sold = Column(Integer, nullable=False)
    total_price = Column(Integer, nullable=False)  # unit price * quantity at sale time
    date_time = Column(String, nullable=False)  # ISO-8601 UTC, shared by all lines of a checkout
    payment_mode = Column(String, nullable=False, default="cash", server_default="cash")
