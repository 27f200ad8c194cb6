import asyncio

from loguru import logger

from .comment_store import BaseCommentStore
from .context import C
from .schema import ServiceConfig
from .service import BaseService
from .utils import PydanticConfigParser, init_logger
from ..config import ConfigParser


class Application:
    def __init__(
        self,
        *args,
        service_config: ServiceConfig | None = None,
        parser: type[PydanticConfigParser] | None = None,
        **kwargs,
    ):
        """
        Initialize application with configuration.

        Args:
            *args: Additional arguments passed to parser. Examples:
                - "config=default"
                - "backend=cmd"
                - "cmd.style=kebab"
                - "comment_store.backend=local"
                - "comment_store.params.root_path=./data"
                - "log.level=DEBUG"
            service_config: A ready config; skips parsing when given.
            parser: Parser class used to build the config, defaults to ConfigParser.
            **kwargs: Overrides in `a__b=value` form, applied after `args`.
        """
        if service_config is None:
            config_parser = (parser or ConfigParser)(ServiceConfig)
            service_config = config_parser.parse_args(*args)
            if kwargs:
                service_config = config_parser.update_config(**kwargs)

        self.service_config: ServiceConfig = service_config
        log_config = self.service_config.log
        init_logger(
            level=log_config.level,
            log_dir=log_config.log_dir,
            rotation=log_config.rotation,
            retention=log_config.retention,
        )
        C.service_config = self.service_config

    async def start(self):
        store_config = self.service_config.comment_store
        store_cls = C.get_comment_store_class(store_config.backend)
        comment_store: BaseCommentStore = store_cls(collection_name=store_config.collection_name, **store_config.params)
        C.comment_store = comment_store
        logger.info(f"comment_store backend={store_config.backend} collection={store_config.collection_name} ready")
        return self

    async def stop(self):
        if C.comment_store is not None:
            await C.comment_store.close()
            C.comment_store = None

    async def __aenter__(self):
        return await self.start()

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.stop()

    @staticmethod
    def _run_sync(coro):
        try:
            asyncio.get_running_loop()
        except RuntimeError:
            return asyncio.run(coro)

        import nest_asyncio

        nest_asyncio.apply()
        return asyncio.run(coro)

    def start_sync(self):
        return self._run_sync(self.start())

    def stop_sync(self):
        self._run_sync(self.stop())

    def __enter__(self):
        return self.start_sync()

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.stop_sync()

    def run_service(self):
        service_cls = C.get_service_class(self.service_config.backend)
        service: BaseService = service_cls(service_config=self.service_config)
        return service.run()
