"""Request/response schemas for the product catalog."""

from pydantic import BaseModel, ConfigDict, Field


class ProductIn(BaseModel):
    """Body for creating or replacing a product."""

    name: str = Field(..., min_length=3, max_length=50, description="Product name")
    price: int = Field(..., gt=0, description="Price in the smallest currency unit")


class ProductOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    price: int
