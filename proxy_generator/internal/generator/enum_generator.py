import logging
from typing import Dict, Iterable, List

from ..exceptions import EnumDefinitionError, TypeDefinitionError
from ..types.api_definition import TypeDef
from ..types.models import EnumDescriptor, EnumMember, Import
from ..types.namespace import parse_namespace

logger = logging.getLogger(__name__)


class EnumGenerator:
    """Генератор перечислений (<name>.enum.ts)"""

    def __init__(self, solution: str, types: Dict[str, TypeDef]):
        self.solution = solution
        self.types = types

    def map_ref_to_enum(self, ref: str) -> EnumDescriptor:
        type_def = self.types.get(ref)
        if type_def is None:
            raise TypeDefinitionError(ref)

        if type_def.enum_names is None or type_def.enum_values is None:
            raise EnumDefinitionError(ref)

        logger.debug(f"Enum {ref}: {len(type_def.enum_names)} members")

        return EnumDescriptor(
            namespace=parse_namespace(self.solution, ref),
            name=ref.split(".")[-1],
            members=[
                EnumMember(key=key, value=value)
                for key, value in zip(type_def.enum_names, type_def.enum_values)
            ],
        )

    def get_enum_refs(self, imports: Iterable[Import]) -> List[str]:
        """Ссылки на перечисления среди импортов (без повторов, в порядке появления)"""
        refs = []
        for _import in imports:
            for ref in sorted(_import.refs):
                type_def = self.types.get(ref)
                if type_def and type_def.is_enum and ref not in refs:
                    refs.append(ref)

        return refs
