"""Example: manage a route table with wildcard patterns."""

from wildcard import Pattern, keys_matching, remove_matching, replace_matching


def build_routes() -> dict:
    """A small route table keyed by dotted route names."""
    return {
        "api.users.list": "users_list",
        "api.users.get": "users_get",
        "api.orders.list": "orders_list",
        "admin.users.ban": "admin_ban",
        "health": "health_check",
    }


def disable_admin(routes: dict) -> list:
    """Point every admin route at a maintenance handler."""
    return replace_matching(routes, Pattern("admin.*"), "maintenance")


def drop_listing(routes: dict) -> list:
    """Remove all listing endpoints."""
    return remove_matching(routes, Pattern("*.list"))


if __name__ == "__main__":
    table = build_routes()
    print(sorted(keys_matching(table, Pattern("api.users.*"))))
    disable_admin(table)
    drop_listing(table)
    print(table)
