from datetime import UTC, datetime

from dishka import FromDishka
from dishka.integrations.fastapi import DishkaRoute
from fastapi import APIRouter

from browserscan.api.common.schema import ApiResponse
from browserscan.api.modules.scan.schema import (
    HealthResponse,
    IpClassifyRequest,
    IpClassifyResponse,
    LeakTestRequest,
    LeakTestResult,
    ScanReport,
    ScanRequest,
    ScoreCard,
    ScoreRequest,
)
from browserscan.api.modules.scan.service import ScanFacadeService
from browserscan.settings import Config

router = APIRouter(route_class=DishkaRoute)


@router.get("/health", response_model=ApiResponse[HealthResponse], status_code=200)
async def health(config: FromDishka[Config]) -> ApiResponse[HealthResponse]:
    return ApiResponse[HealthResponse](
        data=HealthResponse(
            env=config.env,
            version=config.api.version,
            timestamp=int(datetime.now(UTC).timestamp() * 1000),
        )
    )


@router.post("/scan/report", response_model=ApiResponse[ScanReport], status_code=200)
async def build_report(
    payload: ScanRequest,
    facade: FromDishka[ScanFacadeService],
) -> ApiResponse[ScanReport]:
    return ApiResponse[ScanReport](data=facade.build_report(payload))


@router.post("/scan/score", response_model=ApiResponse[ScoreCard], status_code=200)
async def score(
    payload: ScoreRequest,
    facade: FromDishka[ScanFacadeService],
) -> ApiResponse[ScoreCard]:
    return ApiResponse[ScoreCard](data=facade.score(payload))


@router.post(
    "/tools/leak-test",
    response_model=ApiResponse[LeakTestResult],
    status_code=200,
)
async def leak_test(
    payload: LeakTestRequest,
    facade: FromDishka[ScanFacadeService],
) -> ApiResponse[LeakTestResult]:
    return ApiResponse[LeakTestResult](data=facade.leak_test(payload))


@router.post(
    "/tools/ip-classify",
    response_model=ApiResponse[IpClassifyResponse],
    status_code=200,
)
async def classify_ip(
    payload: IpClassifyRequest,
    facade: FromDishka[ScanFacadeService],
) -> ApiResponse[IpClassifyResponse]:
    return ApiResponse[IpClassifyResponse](data=facade.classify_ip(payload))
