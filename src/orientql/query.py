"""Query facade.

``Query`` is the single builder object callers talk to. It always holds
exactly one current command: verb methods (``select``, ``insert``,
``grant``, ``index`` ...) resolve a command id in the registry, build a new
command and make it current; every other fluent method is forwarded to
the current command.

Example:
    >>> from orientql import Query
    >>> query = Query(["Account"])
    >>> query.where("name = ?", "luke").and_where("age > ?", 18).get_raw()
    'SELECT FROM Account WHERE name = "luke" AND age > 18'
    >>> query.grant("READ").on("Account").to("reader").get_raw()
    'GRANT READ ON Account TO reader'

Custom commands can replace built-in ones per instance, or process-wide
through ``ORIENTQL_COMMANDS``:
    >>> query = Query(commands={"select": AuditedSelect})
"""

from types import MappingProxyType
from typing import Any, Dict, Iterable, Mapping, Optional

from orientql.commands import DEFAULT_COMMANDS, Command, CommandFactory
from orientql.common import command_not_found_error, configuration_error
from orientql.logging import get_logger
from orientql.settings import QuerySettings, get_settings

logger = get_logger(__name__)


class Query:
    """Fluent builder that dispatches to one command at a time.

    Args:
        target: Optional targets of the initial SELECT command
        commands: Command id -> factory overrides, merged over the built-in
                  registry and the configured overrides (later entries win)
        settings: Settings to read configured overrides from; defaults to
                  the process-wide settings

    Raises:
        OrientQLError: If an override is not callable (CONFIG_INVALID)
    """

    def __init__(
        self,
        target: Optional[Iterable[Any]] = None,
        commands: Optional[Mapping[str, CommandFactory]] = None,
        settings: Optional[QuerySettings] = None,
    ):
        settings = settings or get_settings()

        self._commands: Dict[str, CommandFactory] = dict(DEFAULT_COMMANDS)
        self._set_commands(settings.command_overrides())
        self._set_commands(commands or {})

        self._command: Command = self._build("select", target)

    @property
    def command(self) -> Command:
        """The current command."""
        return self._command

    @property
    def commands(self) -> Mapping[str, CommandFactory]:
        """Read-only view of the command registry."""
        return MappingProxyType(self._commands)

    def dispatch(self, command_id: str, *args, **kwargs) -> Command:
        """Build the command registered as ``command_id`` and make it current.

        Args:
            command_id: Registry id, e.g. ``"select"`` or ``"index.put"``
            *args: Positional arguments for the command factory
            **kwargs: Keyword arguments for the command factory

        Returns:
            The new current command

        Raises:
            OrientQLError: If the id is not registered (COMMAND_NOT_FOUND);
                           the current command is left unchanged
        """
        self._command = self._build(command_id, *args, **kwargs)
        return self._command

    # Verbs: each one replaces the current command.

    def select(self, projections: Optional[Any] = None, target: Optional[Any] = None) -> Command:
        """Start a new SELECT.

        Without ``target`` the new statement reads from the current
        command's targets, so ``Query(["Account"]).select(["name"])``
        selects from Account.
        """
        if target is None:
            target = self._command.get_token("Target") or None
        command = self.dispatch("select", target)
        if projections:
            command.select(projections)
        return command

    def insert(self) -> Command:
        return self.dispatch("insert")

    def delete(self, from_: Any) -> Command:
        return self.dispatch("delete", from_)

    def update(self, class_: str) -> Command:
        return self.dispatch("update", class_)

    def add(self, updates: Mapping[str, Any], class_: str, append: bool = True) -> Command:
        """Add record references to the link collections of ``class_``."""
        return self.dispatch("update.add", updates, class_, append)

    def remove(self, updates: Mapping[str, Any], class_: str, append: bool = True) -> Command:
        """Remove record references from the link collections of ``class_``."""
        return self.dispatch("update.remove", updates, class_, append)

    def put(self, values: Mapping[str, Mapping[str, Any]], class_: str, append: bool = True) -> Command:
        return self.dispatch("update.put", values, class_, append)

    def grant(self, permission: str) -> Command:
        return self.dispatch("grant", permission)

    def revoke(self, permission: str) -> Command:
        return self.dispatch("revoke", permission)

    def create(
        self,
        class_: str,
        property: Optional[str] = None,
        type: Optional[str] = None,
        linked: Optional[str] = None,
    ) -> Command:
        """CREATE a class, or the ``property`` of ``class_`` when one is given."""
        if property:
            return self._manage_property("create", class_, property, type, linked)
        return self.dispatch("class.create", class_)

    def drop(self, class_: str, property: Optional[str] = None) -> Command:
        """DROP a class, or the ``property`` of ``class_`` when one is given."""
        if property:
            return self._manage_property("drop", class_, property)
        return self.dispatch("class.drop", class_)

    def alter(self, class_: str, attribute: str, value: Any) -> Command:
        return self.dispatch("class.alter", class_, attribute, value)

    def alter_property(self, class_: str, property: str, attribute: str, value: Any) -> Command:
        command = self.dispatch("property.alter", property)
        command.on(class_)
        return command.changing(attribute, value)

    def index(self, property: str, class_: Optional[str] = None, type: Optional[str] = None) -> Command:
        return self.dispatch("index.create", property, class_, type)

    def unindex(self, property: str, class_: Optional[str] = None) -> Command:
        return self.dispatch("index.drop", property, class_)

    def index_count(self, name: str) -> Command:
        return self.dispatch("index.count", name)

    def index_put(self, name: str, key: Any, rid: Any) -> Command:
        return self.dispatch("index.put", name, key, rid)

    def index_remove(self, name: str, key: Any, rid: Optional[Any] = None) -> Command:
        return self.dispatch("index.remove", name, key, rid)

    def lookup(self, name: str) -> Command:
        """Look up entries of the index ``name``; narrow it with ``where``."""
        return self.dispatch("index.lookup", name)

    def link(self, class_: str, property: str, alias: str, inverse: bool = False) -> Command:
        """CREATE LINK ``alias`` from ``class_.property``; finish with ``with_``."""
        return self.dispatch("link", class_, property, alias, inverse)

    def find_references(self, rid: Any, classes: Optional[Iterable[str]] = None, append: bool = True) -> Command:
        command = self.dispatch("references.find", rid)
        return command.in_(list(classes or []), append)

    # Delegates: forwarded to the current command.

    def where(self, condition: str, value: Any = None) -> Command:
        return self._command.where(condition, value)

    def and_where(self, condition: str, value: Any = None) -> Command:
        return self._command.and_where(condition, value)

    def or_where(self, condition: str, value: Any = None) -> Command:
        return self._command.or_where(condition, value)

    def reset_where(self) -> Command:
        return self._command.reset_where()

    def between(self, key: str, left: Any, right: Any) -> Command:
        return self._command.between(key, left, right)

    def fields(self, fields: Any, append: bool = True) -> Command:
        return self._command.fields(fields, append)

    def from_(self, target: Any, append: bool = True) -> Command:
        return self._command.from_(target, append)

    def into(self, target: Any) -> Command:
        return self._command.into(target)

    def values(self, values: Any, append: bool = True) -> Command:
        return self._command.values(values, append)

    def in_(self, classes: Any, append: bool = True) -> Command:
        return self._command.in_(classes, append)

    def limit(self, limit: Any) -> Command:
        return self._command.limit(limit)

    def skip(self, records: Any) -> Command:
        return self._command.skip(records)

    def order_by(self, order: Any, append: bool = True, first: bool = False) -> Command:
        return self._command.order_by(order, append, first)

    def range(self, left: Any = None, right: Any = None) -> Command:
        return self._command.range(left, right)

    def on(self, on: str) -> Command:
        return self._command.on(on)

    def to(self, to: str) -> Command:
        return self._command.to(to)

    def type(self, type: str) -> Command:
        return self._command.type(type)

    def get_raw(self) -> str:
        return self._command.get_raw()

    def get_tokens(self) -> Dict[str, list]:
        return self._command.get_tokens()

    def __str__(self) -> str:
        return self.get_raw()

    def _build(self, command_id: str, *args, **kwargs) -> Command:
        factory = self._commands.get(command_id)
        if factory is None:
            raise command_not_found_error(command_id, type(self).__name__)

        logger.debug(
            "Dispatching command %s",
            command_id,
            extra={"command_id": command_id, "factory": getattr(factory, "__qualname__", repr(factory))},
        )
        return factory(*args, **kwargs)

    def _manage_property(
        self,
        action: str,
        class_: str,
        property: str,
        type: Optional[str] = None,
        linked: Optional[str] = None,
    ) -> Command:
        if action == "create":
            command = self.dispatch("property.create", property, type, linked)
        else:
            command = self.dispatch(f"property.{action}", property)
        return command.on(class_)

    def _set_commands(self, commands: Mapping[str, CommandFactory]) -> None:
        for command_id, factory in commands.items():
            if not callable(factory):
                raise configuration_error(
                    f"command {command_id} must be callable, got {type(factory).__name__}",
                    config_key=command_id,
                )
            self._commands[command_id] = factory
