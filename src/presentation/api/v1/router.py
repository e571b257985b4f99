from fastapi import APIRouter

from .categories import category_router
from .clients import client_router
from .contracts import contract_router
from .health import health_router
from .transactions import transaction_router
from .weeks import week_router

router = APIRouter()

router.include_router(health_router, tags=["Health"])
router.include_router(category_router, tags=["Categories"])
router.include_router(client_router, tags=["Clients"])
router.include_router(contract_router, tags=["Contracts"])
router.include_router(transaction_router, tags=["Transactions"])
router.include_router(week_router, tags=["Weeks"])
