"""
Сборка файлов TypeScript из промежуточного представления модулей
"""

import logging
from typing import Iterable, List

from ..constants import (
    CORE_PACKAGE,
    REACT_QUERY_HOOKS,
    REACT_QUERY_PACKAGE,
    REST_SERVICE_HOOK,
)
from ..types.models import (
    EnumDescriptor,
    Import,
    ImportKeyword,
    Interface,
    Method,
    Model,
    ModuleProxy,
    Project,
    Property,
    Service,
    Signature,
)
from ..utils.text import camel, dir_path, kebab, pascal
from .service_generator import serialize_parameters
from .templates import templates

logger = logging.getLogger(__name__)


def join_path(namespace: str, file_name: str) -> str:
    directory = dir_path(namespace)
    return f"{directory}/{file_name}" if directory else file_name


def service_file_name(service: Service) -> str:
    return join_path(service.namespace, f"{kebab(service.name)}.service.ts")


def hook_file_name(service: Service) -> str:
    return join_path(service.namespace, f"use-{kebab(service.name)}-service.ts")


def model_file_name(model: Model) -> str:
    return join_path(model.namespace, "models.ts")


def enum_file_name(enum: EnumDescriptor) -> str:
    return join_path(enum.namespace, f"{kebab(enum.name)}.enum.ts")


def render_import(_import: Import) -> str:
    keyword = "type " if _import.keyword == ImportKeyword.TYPE else ""
    if _import.alias:
        return templates.import_namespace.format(
            keyword=keyword, alias=_import.alias, path=_import.path
        )

    return templates.import_line.format(
        keyword=keyword,
        specifiers=", ".join(_import.specifiers),
        path=_import.path,
    )


def render_method(method: Method) -> str:
    body = method.body
    url = body.url if body.url.startswith("/") else "/" + body.url

    options = [f"method: '{body.method}'", f"url: `{url}`"]
    if body.params:
        options.append("params: { " + ", ".join(body.params) + " }")
    if body.body:
        options.append(f"body: {body.body}")

    return templates.method.format(
        name=camel(method.signature.name),
        parameters=serialize_parameters(method.signature.parameters),
        request_type=body.request_type,
        response_type=body.response_type,
        options="\n".join(f"\t\t\t\t{_}," for _ in options),
    )


def render_service(service: Service) -> str:
    return templates.service.format(
        name=service.name,
        api_name=service.api_name,
        methods="".join(render_method(_) for _ in service.methods),
    )


def get_hook_imports(imports: Iterable[Import]) -> List[Import]:
    """Импорты сервиса без RestService: типы моделей, перечислений и DTO фреймворка"""
    return [
        _
        for _ in imports
        if not (_.path == CORE_PACKAGE and _.keyword == ImportKeyword.VALUE)
    ]


def get_query_key_type(signature: Signature) -> str:
    name = signature.name.lower()
    return "list" if "list" in name or "all" in name else "detail"


def get_mutation_variables_type(parameters: List[Property]) -> str:
    """
    Тип переменных мутации.

    Examples:
        [] -> 'void'
        [id: string] -> 'string'
        [id: string, input: UpdateDto] -> '{ id: string; input: UpdateDto }'
    """
    if not parameters:
        return "void"
    if len(parameters) == 1:
        return parameters[0].type

    return "{ " + "; ".join(f"{_.name}{_.optional}: {_.type}" for _ in parameters) + " }"


def get_mutation_fn_params(parameters: List[Property]) -> str:
    if not parameters:
        return ""
    if len(parameters) == 1:
        return f"{parameters[0].name}: {parameters[0].type}"

    names = ", ".join(_.name for _ in parameters)
    return f"{{ {names} }}: {get_mutation_variables_type(parameters)}"


def get_query_key(keys_name: str, signature: Signature) -> str:
    key_type = get_query_key_type(signature)
    names = [_.name for _ in signature.parameters]
    if not names:
        return f"{keys_name}.{key_type}s()"
    if len(names) == 1:
        return f"{keys_name}.{key_type}({names[0]})"

    return f"{keys_name}.{key_type}({{ {', '.join(names)} }})"


def render_hook_method(method: Method, keys_name: str) -> str:
    """GET - useQuery, остальные методы - useMutation со сбросом кэша сервиса"""
    signature = method.signature
    arguments = ", ".join(_.name for _ in signature.parameters)

    if method.body.method.upper() == "GET":
        return templates.hook_query.format(
            name=pascal(signature.name),
            parameters=serialize_parameters(signature.parameters),
            query_key=get_query_key(keys_name, signature),
            method=camel(signature.name),
            arguments=arguments,
        )

    return templates.hook_mutation.format(
        name=pascal(signature.name),
        response_type=method.body.response_type,
        variables_type=get_mutation_variables_type(signature.parameters),
        mutation_parameters=get_mutation_fn_params(signature.parameters),
        method=camel(signature.name),
        arguments=arguments,
        keys_name=keys_name,
    )


def render_hook_imports(service: Service) -> List[str]:
    imports = [
        Import(path=REACT_QUERY_PACKAGE, specifiers=REACT_QUERY_HOOKS),
        Import(path=CORE_PACKAGE, specifiers=[REST_SERVICE_HOOK]),
        *get_hook_imports(service.imports),
        Import(
            path=f"./{kebab(service.name)}.service",
            specifiers=[f"{service.name}Service"],
        ),
    ]
    return [render_import(_) for _ in imports]


def render_hook(service: Service) -> str:
    keys_name = camel(service.name) + "QueryKeys"
    return templates.hook.format(
        keys_name=keys_name,
        key=kebab(service.name),
        name=service.name,
        hooks="".join(render_hook_method(_, keys_name) for _ in service.methods),
    )


def render_interface(interface: Interface) -> str:
    properties = [
        f"\t{prop.name}{prop.optional}: {prop.type};" for prop in interface.properties
    ]
    return templates.interface.format(
        identifier=interface.identifier,
        extends=f" extends {interface.base}" if interface.base else "",
        properties="\n".join(properties),
    )


def render_enum_value(value) -> str:
    return f"'{value}'" if isinstance(value, str) else str(value)


def render_enum(enum: EnumDescriptor) -> str:
    return templates.enum.format(
        name=enum.name,
        members="\n".join(
            f"\t{_.key} = {render_enum_value(_.value)}," for _ in enum.members
        ),
        options_name=camel(enum.name) + "Options",
        options="\n".join(
            f"\t{{ key: '{_.key}', value: {enum.name}.{_.key} }}," for _ in enum.members
        ),
    )


class ProjectBuilder:
    """Файлы прокси (сервисы, модели, перечисления) для набора модулей"""

    def __init__(self, module_proxies: Iterable[ModuleProxy], name: str = "proxy"):
        self.module_proxies = list(module_proxies)
        self.project = Project(name=name)

    def generate(self) -> Project:
        for module_proxy in self.module_proxies:
            for service in module_proxy.services:
                self._add_service(service)
            for model in module_proxy.models:
                self._add_model(model)
            for enum in module_proxy.enums:
                self._add_enum(enum)

        logger.debug(f"Project '{self.project.name}': {len(self.project.files)} files")
        return self.project

    def _imports(self, imports: List[Import]) -> List[str]:
        return [render_import(_) for _ in imports]

    def _add_service(self, service: Service):
        self.project.add_file(
            service_file_name(service), imports=self._imports(service.imports)
        ).add_code_block(render_service(service))
        self.project.add_file(
            hook_file_name(service), imports=render_hook_imports(service)
        ).add_code_block(render_hook(service))

    def _add_model(self, model: Model):
        code_file = self.project.get_file(model_file_name(model))
        if code_file is None:
            code_file = self.project.add_file(model_file_name(model))

        for line in self._imports(model.imports):
            if line not in code_file.imports:
                code_file.imports.append(line)

        for interface in model.interfaces:
            code_file.add_code_block(render_interface(interface))

    def _add_enum(self, enum: EnumDescriptor):
        if self.project.get_file(enum_file_name(enum)) is None:
            self.project.add_file(enum_file_name(enum)).add_code_block(
                render_enum(enum)
            )
