from .base_context import BaseContext


class Registry(BaseContext):
    def register(self, name: str = ""):
        def decorator(cls):
            self[name or cls.__name__] = cls
            return cls

        return decorator
