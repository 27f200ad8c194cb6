from enum import Enum


class CaseStyle(str, Enum):
    CAMEL = "camel"

    KEBAB = "kebab"

    DOT = "dot"
