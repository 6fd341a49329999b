"""Product catalog CRUD. Reads are public; writes require an admin token."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.api.v1.auth import require_admin
from app.core.database import get_db
from app.core.security import TokenClaims
from app.models.product import Product
from app.schemas.product import ProductIn, ProductOut
from app.schemas.user import CreatedResponse, MessageResponse

logger = logging.getLogger(__name__)
router = APIRouter()


def _get_product_or_404(db: Session, product_id: int, detail: str) -> Product:
    product = db.get(Product, product_id)
    if product is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=detail)
    return product


@router.get("", response_model=list[ProductOut])
def list_products(db: Annotated[Session, Depends(get_db)]) -> list[ProductOut]:
    products = db.query(Product).order_by(Product.id).all()
    return [ProductOut.model_validate(p) for p in products]


@router.get("/{product_id}", response_model=ProductOut)
def get_product(
    product_id: int,
    db: Annotated[Session, Depends(get_db)],
) -> ProductOut:
    product = _get_product_or_404(db, product_id, "Product not found.")
    return ProductOut.model_validate(product)


# require_admin is declared before get_db so a denied request never opens a session.
@router.post("", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED)
def create_product(
    body: ProductIn,
    admin: Annotated[TokenClaims, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
) -> CreatedResponse:
    """Create a product (admin only)."""
    product = Product(name=body.name, price=body.price)
    db.add(product)
    db.commit()
    db.refresh(product)
    logger.info("Product created", extra={"product_id": product.id, "user_id": admin.user_id})
    return CreatedResponse(message="Product created successfully.", id=product.id)


@router.put("/{product_id}", response_model=MessageResponse)
def update_product(
    product_id: int,
    body: ProductIn,
    admin: Annotated[TokenClaims, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
) -> MessageResponse:
    """Replace a product's name and price (admin only)."""
    product = _get_product_or_404(db, product_id, "Product to update was not found.")
    product.name = body.name
    product.price = body.price
    db.commit()
    logger.info("Product updated", extra={"product_id": product_id, "user_id": admin.user_id})
    return MessageResponse(message="Product updated successfully.")


@router.delete("/{product_id}", response_model=MessageResponse)
def delete_product(
    product_id: int,
    admin: Annotated[TokenClaims, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
) -> MessageResponse:
    """Delete a product (admin only)."""
    product = _get_product_or_404(db, product_id, "Product to delete was not found.")
    db.delete(product)
    db.commit()
    logger.info("Product deleted", extra={"product_id": product_id, "user_id": admin.user_id})
    return MessageResponse(message="Product deleted successfully.")
