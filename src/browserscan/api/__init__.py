from fastapi import APIRouter


def register_routers(router: APIRouter) -> None:
    from browserscan.api.modules.scan.routes import router as scan_router

    router.include_router(scan_router, prefix="/api", tags=["Scan"])
