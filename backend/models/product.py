# backend/models/product.py
from sqlalchemy import Column, Integer, String
from database import Base

# Model Product
# A catalog item with its unit price and current stock count.
# Stock is decremented by checkout and is allowed to go negative.
class Product(Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False, index=True)
    price = Column(Integer, nullable=False)
    quantity = Column(Integer, nullable=False)
