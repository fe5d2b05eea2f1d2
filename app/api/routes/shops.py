# app/api/routes/shops.py

from fastapi import APIRouter, Request, Depends, Response
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session
from app.db.get_db import get_db
from app.services.shop_service import ShopService
from app.utils.helpers import read_json_body, serialize_shop

router = APIRouter()


@router.get("")
def list_shops(db: Session = Depends(get_db)):
    return [serialize_shop(shop) for shop in ShopService(db).list()]


@router.get("/{shop_id}")
def get_single_shop(shop_id: str, db: Session = Depends(get_db)):
    shop = ShopService(db).get(shop_id)
    return serialize_shop(shop, include_products=True)


@router.post("")
async def create_shop(request: Request, db: Session = Depends(get_db)):
    body = await read_json_body(request)
    shop = ShopService(db).create(body)
    return JSONResponse(status_code=201, content=serialize_shop(shop))


@router.put("/{shop_id}")
async def update_shop(shop_id: str, request: Request, db: Session = Depends(get_db)):
    body = await read_json_body(request)
    shop = ShopService(db).update(shop_id, body)
    return serialize_shop(shop)


@router.delete("/{shop_id}")
def delete_shop(shop_id: str, db: Session = Depends(get_db)):
    # products of the shop go with it
    ShopService(db).delete(shop_id)
    return Response(status_code=204)
