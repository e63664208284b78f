# backend/schemas/cart.py
from typing import List
from pydantic import BaseModel, Field, model_validator

from schemas.product import MAX_SQL_INT


# Single cart line sent by the till
class CartLine(BaseModel):
    id: int = Field(..., ge=1, le=MAX_SQL_INT, description="Product ID")
    quantity: int = Field(..., gt=0, le=MAX_SQL_INT)
    price: int = Field(..., ge=0, le=MAX_SQL_INT, description="Unit price charged at the till")

    @model_validator(mode="after")
    def check_line_total(self) -> "CartLine":
        # total_price is stored in the same INTEGER column range
        if self.price * self.quantity > MAX_SQL_INT:
            raise ValueError("line total (price * quantity) is too large")
        return self


class CheckoutRequest(BaseModel):
    cart: List[CartLine]
    payment_mode: str = Field("cash", min_length=1)


class CheckoutResponse(BaseModel):
    message: str
