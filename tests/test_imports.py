"""
Тесты построения импортов
"""

from proxy_generator.internal.constants import CORE_PACKAGE, REST_SERVICE
from proxy_generator.internal.generator.imports import (
    TypeImportMapper,
    merge_import,
    sort_imports,
)
from proxy_generator.internal.types.models import Import, ImportKeyword


class TestTypeImportMapper:
    """Тесты импорта типа по его пространству имен"""

    def test_same_namespace_model(self):
        mapper = TypeImportMapper("Acme.Shop", "Users")
        _import = mapper.map_type("Acme.Shop.Users.UserDto", False)

        assert _import.path == "./models"
        assert _import.keyword == ImportKeyword.TYPE
        assert _import.specifiers == ["UserDto"]
        assert _import.refs == {"Acme.Shop.Users.UserDto"}

    def test_other_namespace_model(self):
        mapper = TypeImportMapper("Acme.Shop", "Users")
        _import = mapper.map_type("Acme.Shop.Shared.EntityBase", False)

        assert _import.path == "../shared/models"

    def test_enum(self):
        mapper = TypeImportMapper("Acme.Shop", "Orders")
        _import = mapper.map_type("Acme.Shop.Users.UserStatus", True)

        assert _import.path == "../users/user-status.enum"
        assert _import.specifiers == ["UserStatus"]

    def test_framework_type(self):
        """Тест: DTO фреймворка импортируются из пакета ядра"""
        mapper = TypeImportMapper("Acme.Shop", "Users")
        _import = mapper.map_type("Volo.Abp.Application.Dtos.PagedResultDto<T0>", False)

        assert _import.path == CORE_PACKAGE
        assert _import.specifiers == ["PagedResultDto"]

    def test_array_ref(self):
        mapper = TypeImportMapper("Acme.Shop", "Users")
        _import = mapper.map_type("Acme.Shop.Users.UserDto[]", False)

        assert _import.refs == {"Acme.Shop.Users.UserDto"}
        assert _import.specifiers == ["UserDto"]

    def test_system_and_empty_types_skipped(self):
        mapper = TypeImportMapper("Acme.Shop", "Users")

        assert mapper.map_type("System.String", False) is None
        assert mapper.map_type("", False) is None

    def test_reduce_types_merges_same_path(self):
        mapper = TypeImportMapper("Acme.Shop", "Users")
        imports = mapper.reduce_types(
            [],
            [
                ("Acme.Shop.Users.UserDto", False),
                ("System.Guid", False),
                ("Acme.Shop.Users.CreateUserDto", False),
                ("Acme.Shop.Users.UserDto", False),
            ],
        )

        assert len(imports) == 1
        assert imports[0].specifiers == ["CreateUserDto", "UserDto"]


class TestImportList:
    """Тесты списка импортов"""

    def test_merge_import_by_key(self):
        imports = [Import(path=CORE_PACKAGE, keyword=ImportKeyword.TYPE, specifiers=["A"])]

        merge_import(imports, Import(path=CORE_PACKAGE, specifiers=[REST_SERVICE]))
        merge_import(
            imports, Import(path=CORE_PACKAGE, keyword=ImportKeyword.TYPE, specifiers=["B"])
        )

        assert len(imports) == 2
        assert imports[0].specifiers == ["A", "B"]
        assert imports[1].specifiers == [REST_SERVICE]

    def test_sort_imports(self):
        """Тест сортировки по пути без ./ и ../"""
        imports = [
            Import(path="./models", keyword=ImportKeyword.TYPE),
            Import(path="../shared/models", keyword=ImportKeyword.TYPE),
            Import(path=CORE_PACKAGE),
            Import(path=CORE_PACKAGE, keyword=ImportKeyword.TYPE),
        ]

        sort_imports(imports)

        assert [(_.path, _.keyword.value) for _ in imports] == [
            (CORE_PACKAGE, "type"),
            (CORE_PACKAGE, "value"),
            ("./models", "type"),
            ("../shared/models", "type"),
        ]
