from typing import Dict

from .base_context import BaseContext
from .registry import Registry
from ..enumeration import RegistryEnum
from ..schema import ServiceConfig
from ..utils import singleton


@singleton
class ServiceContext(BaseContext):
    def __init__(self, **kwargs):
        super().__init__(**kwargs)

        self.service_config: ServiceConfig | None = None
        self.comment_store = None
        self.registry_dict: Dict[RegistryEnum, Registry] = {v: Registry() for v in RegistryEnum.__members__.values()}

    def register(self, name: str, register_type: RegistryEnum):
        return self.registry_dict[register_type].register(name=name)

    def register_comment_store(self, name: str = ""):
        return self.register(name=name, register_type=RegistryEnum.COMMENT_STORE)

    def register_service(self, name: str = ""):
        return self.register(name=name, register_type=RegistryEnum.SERVICE)

    def get_model_class(self, name: str, register_type: RegistryEnum):
        assert name in self.registry_dict[register_type], f"{name} not in registry_dict[{register_type}]"
        return self.registry_dict[register_type][name]

    def get_comment_store_class(self, name: str):
        return self.get_model_class(name, RegistryEnum.COMMENT_STORE)

    def get_service_class(self, name: str):
        return self.get_model_class(name, RegistryEnum.SERVICE)

    def get_comment_store(self):
        assert self.comment_store is not None, "comment_store is not initialized, start the Application first"
        return self.comment_store


C = ServiceContext()
