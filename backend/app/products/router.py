from fastapi import APIRouter, Depends, status
from sqlmodel import Session
from ..core.database import get_session
from ..models.Product import ProductCreate, ProductUpdate, ProductResponse
from ..models.User import User
from ..auth.service import get_current_user
from .service import list_products, get_product, create_product, update_product, delete_product

router = APIRouter(prefix="/products", tags=["products"])

@router.get("", response_model=list[ProductResponse])
def read_products(session: Session = Depends(get_session)):
    """
    List all products.
    """
    return list_products(session)

@router.get("/{product_id}", response_model=ProductResponse)
def read_product(product_id: int, session: Session = Depends(get_session)):
    return get_product(session, product_id)

@router.post("", response_model=ProductResponse, status_code=status.HTTP_201_CREATED)
def create_new_product(
    product: ProductCreate,
    session: Session = Depends(get_session),
    current_user: User = Depends(get_current_user)
):
    """
    Create a product (requires a valid session token).
    """
    return create_product(session, product)

@router.put("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
def update_existing_product(
    product_id: int,
    product: ProductUpdate,
    session: Session = Depends(get_session),
    current_user: User = Depends(get_current_user)
):
    """
    Update only the provided fields of a product.
    """
    update_product(session, product_id, product)
    return None

@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_existing_product(
    product_id: int,
    session: Session = Depends(get_session),
    current_user: User = Depends(get_current_user)
):
    delete_product(session, product_id)
    return None
