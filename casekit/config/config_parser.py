from ..core.utils import PydanticConfigParser


class ConfigParser(PydanticConfigParser):
    """Resolves `config=<name>` against the yaml files shipped in this directory."""

    default_config: str = "default"
