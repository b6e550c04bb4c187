from fastapi import HTTPException
from sqlmodel import Session, select

from ..core.logging import get_logger
from ..models.Product import Product, ProductCreate, ProductUpdate

logger = get_logger("products.service")

def list_products(session: Session) -> list[Product]:
    return list(session.exec(select(Product).order_by(Product.id)).all())

def get_product(session: Session, product_id: int) -> Product:
    product = session.get(Product, product_id)
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")
    return product

def create_product(session: Session, data: ProductCreate) -> Product:
    product = Product(name=data.name, price=data.price, brand_id=data.brand_id)
    session.add(product)
    session.commit()
    session.refresh(product)
    logger.info("product_created", product_id=product.id)
    return product

def update_product(session: Session, product_id: int, data: ProductUpdate) -> Product:
    product = get_product(session, product_id)

    # Blank names are ignored, like missing ones
    if data.name is not None and data.name.strip():
        product.name = data.name

    if data.price is not None:
        product.price = data.price

    if data.brand_id is not None:
        product.brand_id = data.brand_id

    session.add(product)
    session.commit()
    session.refresh(product)
    return product

def delete_product(session: Session, product_id: int) -> None:
    product = get_product(session, product_id)
    session.delete(product)
    session.commit()
    logger.info("product_deleted", product_id=product_id)
