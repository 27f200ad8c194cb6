from pydantic import BaseModel, ConfigDict, Field


class HttpConfig(BaseModel):
    model_config = ConfigDict(extra="allow")

    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8001)
    timeout_keep_alive: int = Field(default=600)
    limit_concurrency: int = Field(default=64)


class CmdConfig(BaseModel):
    model_config = ConfigDict(extra="allow")

    style: str = Field(default="camel")
    text: str = Field(default="")


class CommentStoreConfig(BaseModel):
    model_config = ConfigDict(extra="allow")

    backend: str = Field(default="memory")
    collection_name: str = Field(default="comments")
    params: dict = Field(default_factory=dict)


class LogConfig(BaseModel):
    level: str = Field(default="INFO")
    log_dir: str = Field(default="")
    rotation: str = Field(default="10 MB")
    retention: str = Field(default="7 days")


class ServiceConfig(BaseModel):
    backend: str = Field(default="http")
    app_name: str = Field(default="casekit")
    http: HttpConfig = Field(default_factory=HttpConfig)
    cmd: CmdConfig = Field(default_factory=CmdConfig)
    comment_store: CommentStoreConfig = Field(default_factory=CommentStoreConfig)
    log: LogConfig = Field(default_factory=LogConfig)
