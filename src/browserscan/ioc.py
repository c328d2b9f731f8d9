from dishka import AsyncContainer, Provider, Scope, make_async_container, provide

from browserscan.api.modules.scan.service import ScanFacadeService
from browserscan.settings import Config, get_config


class AppProvider(Provider):
    """Application provider for dependency injection."""

    def __init__(self, config: Config | None = None):
        super().__init__()
        self._config = config

    @provide(scope=Scope.APP)
    def get_config(self) -> Config:
        if self._config is not None:
            return self._config
        return get_config()


class ServicesProvider(Provider):
    """Services provider for dependency injection."""

    @provide(scope=Scope.APP)
    def get_scan_facade_service(self, config: Config) -> ScanFacadeService:
        return ScanFacadeService(config=config)


def get_async_container(config: Config | None = None) -> AsyncContainer:
    return make_async_container(
        AppProvider(config),
        ServicesProvider(),
    )
