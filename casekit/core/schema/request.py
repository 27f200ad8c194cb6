from typing import Any

from pydantic import Field, BaseModel, ConfigDict

from ..enumeration import CaseStyle


class ConvertRequest(BaseModel):
    model_config = ConfigDict(extra="allow")

    style: CaseStyle = Field(default=CaseStyle.CAMEL)
    # left untyped so non-string input reaches the converter and is rejected there
    text: Any = Field(default=None)
