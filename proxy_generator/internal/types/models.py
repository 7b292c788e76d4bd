import re
from enum import Enum
from typing import List, Optional, Set, Union

from pydantic import BaseModel, field_validator

from ..exceptions import ActionDefinitionError
from ..utils.text import camel
from .api_definition import ParameterInBody
from .type_adapter import adapt_type


class ImportKeyword(str, Enum):
    VALUE = "value"
    TYPE = "type"


class BindingSource(str, Enum):
    """Откуда берется параметр действия (bindingSourceId)"""

    PATH = "Path"
    QUERY = "Query"
    MODEL = "ModelBinding"
    BODY = "Body"
    FORM = "Form"
    FORM_FILE = "FormFile"
    HEADER = "Header"
    CUSTOM = "Custom"
    SERVICES = "Services"


class Import(BaseModel):
    path: str
    keyword: ImportKeyword = ImportKeyword.VALUE
    refs: Set[str] = set()
    specifiers: List[str] = []
    alias: Optional[str] = None

    @field_validator("specifiers")
    def specifiers_check(cls, value):
        return sorted(set(value))

    @property
    def key(self) -> tuple:
        return self.path, self.keyword

    def merge(self, other: "Import") -> "Import":
        """Объединение импортов с одинаковым путем и ключевым словом"""
        self.refs = self.refs | other.refs
        self.specifiers = sorted(set(self.specifiers) | set(other.specifiers))
        return self


class Property(BaseModel):
    name: str
    type: str
    optional: str = ""
    default: str = ""

    # Листовые типы исходного (не упрощенного) типа - только для импортов
    refs: List[str] = []


class Interface(BaseModel):
    identifier: str
    namespace: str
    base: Optional[str] = None
    ref: str
    properties: List[Property] = []


class Model(BaseModel):
    namespace: str
    path: str
    imports: List[Import] = []
    interfaces: List[Interface] = []

    def has_interface(self, identifier: str) -> bool:
        return any(_.identifier == identifier for _ in self.interfaces)


class EnumMember(BaseModel):
    key: str
    value: Union[int, str]


class EnumDescriptor(BaseModel):
    namespace: str
    name: str
    members: List[EnumMember] = []


class Signature(BaseModel):
    name: str
    parameters: List[Property] = []
    return_type: str = ""


class Body(BaseModel):
    method: str
    url: str
    response_type: str
    request_type: str = "any"
    params: List[str] = []
    body: Optional[str] = None

    def register_action_parameter(self, param: ParameterInBody) -> None:
        """
        Разбор параметра действия по источнику привязки.

        Path - подстановка в шаблон url, Query/ModelBinding - пара в params,
        Body - тело запроса. Прочие источники игнорируются.
        """
        key = camel(param.name)
        if param.descriptor_name:
            value = f"{param.descriptor_name}.{key}"
        else:
            value = param.name_on_method

        source = param.binding_source_id

        if source == BindingSource.PATH:
            self.url = re.sub(
                r"\{" + re.escape(param.name) + r"\}",
                lambda _: "${" + value + "}",
                self.url,
                flags=re.IGNORECASE,
            )
        elif source in (BindingSource.QUERY, BindingSource.MODEL):
            self.params.append(f"{key}: {value}")
        elif source == BindingSource.BODY:
            if self.body is not None:
                raise ActionDefinitionError(f"{self.method} {self.url}", value)

            self.body = value
            if param.type_simple:
                self.request_type = adapt_type(param.type_simple)


class Method(BaseModel):
    signature: Signature
    body: Body


class Service(BaseModel):
    namespace: str
    name: str
    api_name: str = "default"
    imports: List[Import] = []
    methods: List[Method] = []


class ModuleProxy(BaseModel):
    """Результат генерации одного модуля бэкенда"""

    module: str
    services: List[Service] = []
    models: List[Model] = []
    enums: List[EnumDescriptor] = []


class CodeBlock(BaseModel):
    order: int = 0
    code: str = ""

    def __str__(self):
        return self.code.replace("\t", "  ")


class CodeFile(BaseModel):
    file_name: str

    imports: List[str] = []
    code_blocks: List[CodeBlock] = []

    def __str__(self):
        return (
            "\n\n".join(
                filter(
                    bool,
                    [
                        "\n".join(self.imports),
                        "\n\n".join(
                            map(
                                str,
                                sorted(self.code_blocks, key=lambda x: x.order),
                            )
                        ),
                    ],
                )
            )
            + "\n"
        )

    def add_code_block(
        self, code_block: Union["CodeBlock", str], **kwargs
    ) -> "CodeFile":
        if isinstance(code_block, str):
            code_block = CodeBlock(code=code_block, **kwargs)

        self.code_blocks.append(code_block)
        return self


class Project(BaseModel):
    name: str
    files: List[CodeFile] = []

    def add_file(self, file_name: Union["CodeFile", str], **kwargs) -> "CodeFile":
        if isinstance(file_name, str):
            file_name = CodeFile(file_name=file_name, **kwargs)

        self.files.append(file_name)
        return file_name

    def get_file(self, file_name: str) -> Optional["CodeFile"]:
        return next((_ for _ in self.files if _.file_name == file_name), None)
