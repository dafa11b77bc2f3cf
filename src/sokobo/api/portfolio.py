"""Portfolio showcase endpoints."""

from fastapi import APIRouter, Depends, Response

from sokobo.api.dependencies import ADMIN_ONLY, portfolio_service
from sokobo.api.schemas import AddImageRequest, CreatePortfolioItemRequest, PortfolioItemResponse, UpdatePortfolioItemRequest
from sokobo.portfolio.services import PortfolioService

router = APIRouter(prefix="/api/portfolio", tags=["portfolio"])


def _item(item) -> PortfolioItemResponse:
    return PortfolioItemResponse.model_validate(item.to_dict())


@router.get("", response_model=list[PortfolioItemResponse])
async def list_portfolio(portfolio: PortfolioService = Depends(portfolio_service)) -> list[PortfolioItemResponse]:
    return [_item(i) for i in portfolio.list_items()]


@router.get("/{item_id}", response_model=PortfolioItemResponse)
async def get_portfolio_item(
    item_id: str, portfolio: PortfolioService = Depends(portfolio_service)
) -> PortfolioItemResponse:
    return _item(portfolio.get(item_id))


@router.post("", status_code=201, response_model=PortfolioItemResponse, dependencies=ADMIN_ONLY)
async def create_portfolio_item(
    body: CreatePortfolioItemRequest,
    portfolio: PortfolioService = Depends(portfolio_service),
) -> PortfolioItemResponse:
    return _item(portfolio.create(**body.model_dump()))


@router.put("/{item_id}", response_model=PortfolioItemResponse, dependencies=ADMIN_ONLY)
async def update_portfolio_item(
    item_id: str,
    body: UpdatePortfolioItemRequest,
    portfolio: PortfolioService = Depends(portfolio_service),
) -> PortfolioItemResponse:
    return _item(portfolio.update(item_id, **body.model_dump(exclude_unset=True)))


@router.delete("/{item_id}", status_code=204, dependencies=ADMIN_ONLY)
async def delete_portfolio_item(item_id: str, portfolio: PortfolioService = Depends(portfolio_service)) -> Response:
    portfolio.delete(item_id)
    return Response(status_code=204)


@router.post("/{item_id}/images", response_model=PortfolioItemResponse, dependencies=ADMIN_ONLY)
async def add_portfolio_image(
    item_id: str,
    body: AddImageRequest,
    portfolio: PortfolioService = Depends(portfolio_service),
) -> PortfolioItemResponse:
    return _item(portfolio.add_image(item_id, body.url))


@router.delete("/{item_id}/images/{index}", response_model=PortfolioItemResponse, dependencies=ADMIN_ONLY)
async def remove_portfolio_image(
    item_id: str,
    index: int,
    portfolio: PortfolioService = Depends(portfolio_service),
) -> PortfolioItemResponse:
    return _item(portfolio.remove_image(item_id, index))
