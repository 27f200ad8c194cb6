import copy
import inspect
import json
from pathlib import Path
from typing import Any, Generic, Type, TypeVar

import yaml
from loguru import logger
from pydantic import BaseModel

T = TypeVar("T", bound=BaseModel)


class PydanticConfigParser(Generic[T]):
    """Build a pydantic config from model defaults, YAML files and `a.b=c` overrides.

    Later sources win: defaults < yaml files (in the order given) < dot-notation args.
    Relative yaml names are looked up next to the module defining the parser class first.
    """

    default_config: str = "default"

    def __init__(self, config_class: Type[T]):
        self.config_class = config_class
        self.config_dict: dict = {}

    def _deep_merge(self, base_dict: dict, update_dict: dict) -> dict:
        result = copy.deepcopy(base_dict)

        for key, value in update_dict.items():
            if isinstance(result.get(key), dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = copy.deepcopy(value)

        return result

    @staticmethod
    def _convert_value(value_str: str) -> Any:
        value_str = value_str.strip()
        lower_str = value_str.lower()

        if lower_str in ("true", "false"):
            return lower_str == "true"

        if lower_str in ("none", "null"):
            return None

        try:
            if "e" in lower_str or "." in value_str:
                return float(value_str)
            return int(value_str)
        except ValueError:
            pass

        try:
            return json.loads(value_str)
        except (json.JSONDecodeError, ValueError):
            pass

        return value_str

    @staticmethod
    def load_from_yaml(yaml_path: str | Path) -> dict:
        yaml_path = Path(yaml_path)
        if not yaml_path.exists():
            raise FileNotFoundError(f"Configuration file does not exist: {yaml_path}")

        with yaml_path.open(encoding="utf-8") as f:
            return yaml.safe_load(f) or {}

    def merge_configs(self, *config_dicts: dict) -> dict:
        result = {}
        for config_dict in config_dicts:
            result = self._deep_merge(result, config_dict)
        return result

    def _is_str_field(self, keys: list[str]) -> bool:
        """Whether `keys` walks nested config models down to a field annotated as plain `str`."""
        model: Type[BaseModel] = self.config_class
        *parents, leaf = keys
        for key in parents:
            field = model.model_fields.get(key)
            if field is None or not (isinstance(field.annotation, type) and issubclass(field.annotation, BaseModel)):
                return False
            model = field.annotation

        field = model.model_fields.get(leaf)
        return field is not None and field.annotation is str

    def parse_dot_notation(self, dot_list: list[str]) -> dict:
        config_dict = {}

        for item in dot_list:
            if "=" not in item:
                continue

            key_path, value_str = item.split("=", 1)
            keys = key_path.split(".")
            current_dict = config_dict
            for key in keys[:-1]:
                current_dict = current_dict.setdefault(key, {})

            # str fields keep the raw text, so "2024" or "true" stay strings
            if self._is_str_field(keys):
                current_dict[keys[-1]] = value_str
            else:
                current_dict[keys[-1]] = self._convert_value(value_str)

        return config_dict

    def _resolve_config_path(self, config_name: str) -> Path:
        if not config_name.endswith(".yaml"):
            config_name += ".yaml"

        config_path = Path(inspect.getfile(self.__class__)).parent / config_name
        if config_path.exists():
            logger.info(f"load config={config_path}")
            return config_path

        logger.warning(f"config={config_path} not found, try {config_name}")
        config_path = Path(config_name)
        if not config_path.exists():
            raise FileNotFoundError(f"config={config_path} not found")
        return config_path

    def parse_args(self, *args: str) -> T:
        configs_to_merge = [self.config_class().model_dump()]

        config = ""
        override_args = []
        for arg in args:
            if "=" not in arg:
                continue

            arg = arg.lstrip("-")
            if arg.startswith("c=") or arg.startswith("config="):
                config = arg.split("=", 1)[-1]
            else:
                override_args.append(arg)

        config = config or self.default_config
        for config_name in [c.strip() for c in config.split(",") if c.strip()]:
            configs_to_merge.append(self.load_from_yaml(self._resolve_config_path(config_name)))

        if override_args:
            configs_to_merge.append(self.parse_dot_notation(override_args))

        self.config_dict = self.merge_configs(*configs_to_merge)
        return self.config_class.model_validate(self.config_dict)

    def update_config(self, **kwargs) -> T:
        """Apply keyword overrides on top of the last parsed config; `a__b=1` means `a.b=1`."""
        dot_list = [f"{key.replace('__', '.')}={value}" for key, value in kwargs.items()]
        override_config = self.parse_dot_notation(dot_list)
        final_config = self.merge_configs(self.config_dict, override_config)
        return self.config_class.model_validate(final_config)
