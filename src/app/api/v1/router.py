# app/api/v1/router.py
from fastapi import APIRouter

from app.api.v1.routers import (
    buyers,
    carriers,
    employees,
    localities,
    orders,
    products,
    sections,
    sellers,
    warehouses,
)

# Main router of the API v1, mounted under settings.API_PREFIX
api_router = APIRouter()

# ==================== MASTER DATA ====================

api_router.include_router(localities.router)
api_router.include_router(warehouses.router)
api_router.include_router(sections.router)
api_router.include_router(employees.router)

# ==================== CATALOGUE ====================

api_router.include_router(sellers.router)
api_router.include_router(products.router)
api_router.include_router(orders.product_batches_router)
api_router.include_router(orders.product_records_router)

# ==================== LOGISTICS ====================

api_router.include_router(carriers.router)
api_router.include_router(buyers.router)
api_router.include_router(orders.purchase_orders_router)
api_router.include_router(orders.inbound_orders_router)
