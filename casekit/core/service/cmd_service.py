from loguru import logger

from .base_service import BaseService
from ..context import C
from ..schema import Response
from ..utils import convert_case


@C.register_service("cmd")
class CmdService(BaseService):
    """Convert the single string given as `cmd.text` into `cmd.style` and log it."""

    def run(self) -> Response:
        cmd_config = self.service_config.cmd
        answer = convert_case(cmd_config.text, cmd_config.style)
        response = Response(answer=answer, metadata={"style": cmd_config.style})
        logger.info(f"response.answer={response.answer}")
        return response
