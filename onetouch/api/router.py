# onetouch/api/router.py
from fastapi import APIRouter

from onetouch.modules.products import products_router
from onetouch.modules.sales import sales_router
from onetouch.modules.stock import stock_router
from onetouch.modules.stats import stats_router

# Router principal de la API, montado en /api
api_router = APIRouter(prefix="/api")

api_router.include_router(products_router)  # /api/products
api_router.include_router(sales_router)     # /api/sales
api_router.include_router(stock_router)     # /api/stock/add
api_router.include_router(stats_router)     # /api/stats
