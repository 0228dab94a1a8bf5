"""Order history for the authenticated user."""

from fastapi import APIRouter

from greenbite.application.queries import ListOrdersQuery
from greenbite.presentation.api.dependencies import RepoFactory
from greenbite.presentation.api.schemas.common import ErrorResponse
from greenbite.presentation.api.schemas.orders import OrderListResponse, OrderResponse

router = APIRouter()


@router.get(
    "",
    summary="List orders",
    responses={401: {"model": ErrorResponse, "description": "Not signed in"}},
)
async def list_orders(factory: RepoFactory) -> OrderListResponse:
    """List the current user's orders, newest first."""
    query = ListOrdersQuery.from_factory(factory)
    orders = await query.execute()
    return OrderListResponse(orders=[OrderResponse.from_domain(o) for o in orders])
