# app/api/routes/products.py

from fastapi import APIRouter, Request, Depends, Response
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session
from app.db.get_db import get_db
from app.services.product_service import ProductService
from app.utils.helpers import read_json_body, serialize_product

router = APIRouter()


@router.get("")
def list_products(db: Session = Depends(get_db)):
    return [serialize_product(product) for product in ProductService(db).list()]


@router.get("/{product_id}")
def get_product(product_id: str, db: Session = Depends(get_db)):
    return serialize_product(ProductService(db).get(product_id))


@router.post("")
async def create_product(request: Request, db: Session = Depends(get_db)):
    body = await read_json_body(request)
    product = ProductService(db).create(body)
    return JSONResponse(status_code=201, content=serialize_product(product))


@router.put("/{product_id}")
async def update_product(product_id: str, request: Request, db: Session = Depends(get_db)):
    body = await read_json_body(request)
    product = ProductService(db).update(product_id, body)
    return serialize_product(product)


@router.delete("/{product_id}")
def delete_product(product_id: str, db: Session = Depends(get_db)):
    ProductService(db).delete(product_id)
    return Response(status_code=204)
