"""Permission management: GRANT and REVOKE."""

from orientql.commands.base import Command


class Grant(Command):
    SCHEMA = "GRANT :Permission ON :Resource TO :Role"

    def __init__(self, permission: str):
        super().__init__()

        self.set_token("Permission", permission)

    def on(self, resource: str) -> "Grant":
        return self.set_token("Resource", resource, append=False)

    def to(self, role: str) -> "Grant":
        return self.set_token("Role", role, append=False)


class Revoke(Grant):
    SCHEMA = "REVOKE :Permission ON :Resource FROM :Role"

    def from_(self, role: str, append: bool = False) -> "Revoke":
        return self.set_token("Role", role, append)
