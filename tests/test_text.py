"""
Тесты утилит преобразования имен
"""

from proxy_generator.internal.utils import camel, dir_path, interpolate, kebab, pascal


class TestText:
    """Тесты camel/pascal/kebab"""

    def test_camel(self):
        assert camel("UserName") == "userName"
        assert camel("max_result-count") == "maxResultCount"
        assert camel("id") == "id"
        assert camel("") == ""

    def test_pascal(self):
        assert pascal("userName") == "UserName"
        assert pascal("get-list") == "GetList"

    def test_kebab(self):
        assert kebab("IdentityUser") == "identity-user"
        assert kebab("UserStatus") == "user-status"
        assert kebab("Users") == "users"
        assert kebab("Api2Client") == "api2-client"

    def test_dir_path(self):
        """Тест пути директории из пространства имен"""
        assert dir_path("Identity.Users") == "identity/users"
        assert dir_path("OrderItems") == "order-items"
        assert dir_path("") == ""

    def test_interpolate(self):
        assert interpolate("{0} -> {1}", "a", 2) == "a -> 2"
        assert interpolate("no params") == "no params"
