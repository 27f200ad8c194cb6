import uvicorn
from fastapi import APIRouter, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger

from .base_service import BaseService
from ..comment_store import BaseCommentStore
from ..context import C
from ..schema import ConvertRequest, Response, ServiceConfig
from ..utils import InvalidArgumentError, convert_case


@C.register_service("http")
class HttpService(BaseService):

    def __init__(self, service_config: ServiceConfig, comment_store: BaseCommentStore | None = None):
        super().__init__(service_config=service_config)
        self._comment_store: BaseCommentStore | None = comment_store

        self.app = FastAPI(title=service_config.app_name)
        self.app.add_middleware(
            CORSMiddleware,
            allow_origins=["*"],
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

        def health_check():
            return {"status": "healthy"}

        self.app.get("/health")(health_check)
        self.app.post("/convert", response_model=Response)(self.convert)
        self.app.include_router(self.build_comment_router(), prefix="/api/comments")

    @property
    def comment_store(self) -> BaseCommentStore:
        if self._comment_store is None:
            self._comment_store = C.get_comment_store()
        return self._comment_store

    @staticmethod
    async def convert(request: ConvertRequest) -> Response:
        try:
            answer = convert_case(request.text, request.style)
        except InvalidArgumentError as e:
            raise HTTPException(status_code=400, detail=str(e))

        return Response(answer=answer, metadata={"style": request.style.value})

    def build_comment_router(self) -> APIRouter:
        router = APIRouter()

        async def list_comments():
            try:
                comments = await self.comment_store.list()
            except Exception as e:
                logger.exception(f"Error fetching comments: {e}")
                return JSONResponse(status_code=500, content={"message": "Internal server error"})

            return JSONResponse(status_code=200, content=[c.model_dump(mode="json") for c in comments])

        async def delete_comment(comment_id: str):
            try:
                deleted = await self.comment_store.delete(comment_id)
            except Exception as e:
                logger.exception(f"Error deleting comment={comment_id}: {e}")
                return JSONResponse(status_code=500, content={"message": "Internal server error"})

            if not deleted:
                return JSONResponse(status_code=404, content={"message": "Comment not found"})
            return JSONResponse(status_code=200, content={"message": "Comment deleted successfully"})

        router.get("")(list_comments)
        router.delete("/{comment_id}")(delete_comment)
        return router

    def run(self):
        http_config = self.service_config.http
        logger.info(f"serving {self.service_config.app_name} on {http_config.host}:{http_config.port}")
        uvicorn.run(
            self.app,
            host=http_config.host,
            port=http_config.port,
            timeout_keep_alive=http_config.timeout_keep_alive,
            limit_concurrency=http_config.limit_concurrency,
            **http_config.model_extra
        )
