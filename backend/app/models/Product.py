from sqlmodel import Field, SQLModel

# ==========================================
# SQLModel (Database Entity + Base Pydantic)
# ==========================================
class Product(SQLModel, table=True):
    __tablename__ = "products"

    id: int | None = Field(default=None, primary_key=True)
    name: str = Field(index=True)
    price: float
    brand_id: int = Field(index=True)

# ==========================================
# Pydantic Models (DTOs)
# ==========================================

class ProductCreate(SQLModel):
    name: str
    price: float
    brand_id: int

# Only the provided fields are changed
class ProductUpdate(SQLModel):
    name: str | None = None
    price: float | None = None
    brand_id: int | None = None

class ProductResponse(SQLModel):
    id: int
    name: str
    price: float
    brand_id: int
