# backend/schemas/product.py
from pydantic import BaseModel, Field, ConfigDict

# Largest value a SQL INTEGER column (SQLite / PostgreSQL BIGINT) can hold
MAX_SQL_INT = 2**63 - 1


# Base configuration for ORM compatibility
class ORMBase(BaseModel):
    model_config = ConfigDict(from_attributes=True)


# Shared attributes for create and full-replace update
class ProductBase(ORMBase):
    name: str = Field(..., min_length=1, description="Nazwa produktu")
    price: int = Field(..., ge=0, le=MAX_SQL_INT)
    quantity: int = Field(..., ge=0, le=MAX_SQL_INT)


class ProductCreate(ProductBase):
    pass


# PUT replaces every field
class ProductUpdate(ProductBase):
    pass


# Stored rows can carry negative stock after checkout
class ProductOut(ORMBase):
    id: int
    name: str
    price: int
    quantity: int


class ProductCreated(BaseModel):
    id: int


class ProductUpdated(BaseModel):
    updated: int


class ProductDeleted(BaseModel):
    deleted: int
