"""
Генерация интерфейсов TypeScript по ссылкам на типы из описания API
"""

import logging
import re
from typing import Dict, Iterable, List, Set

from ..constants import FRAMEWORK_TYPE_REGEX, NAME_VALUE_REF
from ..types.api_definition import TypeDef
from ..types.generics import parse_generics
from ..types.models import Interface, Model, Property
from ..types.namespace import parse_namespace, relative_path_to_model
from ..types.type_adapter import (
    adapt_type,
    parse_type,
    remove_type_modifiers,
)
from ..utils.text import camel
from .imports import TypeImportMapper, TypeRef

logger = logging.getLogger(__name__)


NAME_VALUE_INTERFACE = Interface(
    identifier="NameValue<T = string>",
    namespace="Volo.Abp",
    ref=NAME_VALUE_REF,
    properties=[
        Property(name="name", type="string"),
        Property(name="value", type="T"),
    ],
)


def extract_refs(type_name: str) -> List[str]:
    """Все листовые типы (с плейсхолдерами T0..Tn) исходного типа"""
    refs = []
    for part in parse_type(type_name, remove_type_modifiers):
        refs.extend(parse_generics(part).to_generics())

    return refs


def get_identifier(type_name: str) -> str:
    return remove_type_modifiers(adapt_type(type_name))


class ModelGenerator:
    """Генератор моделей (models.ts) для пространств имен модуля"""

    def __init__(self, solution: str, types: Dict[str, TypeDef]):
        self.solution = solution
        self.types = types

    def build_interface(self, ref: str) -> Interface:
        type_def = self.types[ref]

        identifier = get_identifier(ref)
        for index, argument in enumerate(type_def.generic_arguments or []):
            identifier = re.sub(rf"\bT{index}\b", argument, identifier, count=1)

        interface = Interface(
            identifier=identifier,
            namespace=parse_namespace(self.solution, ref),
            base=get_identifier(type_def.base_type) if type_def.base_type else None,
            ref=ref,
        )

        for prop in type_def.properties or []:
            interface.properties.append(
                Property(
                    name=camel(prop.name),
                    type=adapt_type(prop.type_simple),
                    optional="?" if prop.type_simple.endswith("?") else "",
                    refs=extract_refs(prop.type),
                )
            )

        return interface

    def reduce_ref_to_interfaces(
        self, interfaces: List[Interface], ref: str
    ) -> List[Interface]:
        """
        Интерфейс для ref и всех типов, на которые он ссылается.

        Обход идет в глубину через свойства (кроме перечислений) и generic-аргументы
        базового типа. Неизвестные ссылки пропускаются. Повторы между разными
        вызовами не отсекаются - это делает группировка в reduce_refs_to_models.
        """
        stack = [ref]
        visited: Set[str] = set()

        while stack:
            current = stack.pop()
            if current in visited or current not in self.types:
                continue

            visited.add(current)
            interface = self.build_interface(current)
            interfaces.append(interface)

            nested = [
                _
                for prop in interface.properties
                for _ in prop.refs
                if not (_ in self.types and self.types[_].is_enum)
            ]
            base_type = self.types[current].base_type
            if base_type:
                nested.extend(parse_generics(base_type).to_generics())

            stack.extend(reversed(nested))

        return interfaces

    def reduce_refs_to_models(
        self, models: List[Model], refs: Iterable[str]
    ) -> List[Model]:
        """Группировка интерфейсов по пространствам имен и сбор импортов моделей"""
        interfaces: List[Interface] = []
        for ref in refs:
            self.reduce_ref_to_interfaces(interfaces, ref)

        interfaces.sort(key=lambda _: _.identifier)

        for interface in interfaces:
            if FRAMEWORK_TYPE_REGEX.match(interface.ref):
                continue
            if self.types[interface.ref].is_enum:
                continue
            if interface.ref.startswith(NAME_VALUE_REF):
                interface = NAME_VALUE_INTERFACE

            model = next((_ for _ in models if _.namespace == interface.namespace), None)

            if model is None:
                logger.debug(f"New model for namespace '{interface.namespace}'")
                models.append(
                    Model(
                        namespace=interface.namespace,
                        path=relative_path_to_model(
                            interface.namespace, interface.namespace
                        ),
                        interfaces=[interface],
                    )
                )
            elif not model.has_interface(interface.identifier):
                model.interfaces.append(interface)

        for model in models:
            self.resolve_model_imports(model)

        return models

    def resolve_model_imports(self, model: Model) -> None:
        """Импорты базовых типов и свойств из других пространств имен и перечислений"""
        to_import: List[TypeRef] = []

        for interface in model.interfaces:
            type_def = self.types.get(interface.ref)
            base_type = type_def.base_type if type_def else None
            if base_type and parse_namespace(self.solution, base_type) != model.namespace:
                to_import.append((base_type.split("<")[0], False))

            for prop in interface.properties:
                for ref in prop.refs:
                    prop_type = self.types.get(ref)
                    if prop_type is None:
                        continue
                    if prop_type.is_enum:
                        to_import.append((ref, True))
                    elif parse_namespace(self.solution, ref) != model.namespace:
                        to_import.append((ref, False))

        if to_import:
            TypeImportMapper(self.solution, model.namespace).reduce_types(
                model.imports, to_import
            )
