"""Built-in command registry.

Maps the logical command ids used by the ``Query`` facade to the factories
that build them. Factories are plain callables, so an override can be a
``Command`` subclass or any function returning a command.
"""

from types import MappingProxyType
from typing import Callable, Mapping

from orientql.commands import credential, index, oclass, property, reference, update
from orientql.commands.base import Command
from orientql.commands.delete import Delete
from orientql.commands.insert import Insert
from orientql.commands.link import Link
from orientql.commands.select import Select

CommandFactory = Callable[..., Command]

DEFAULT_COMMANDS: Mapping[str, CommandFactory] = MappingProxyType({
    "select": Select,
    "insert": Insert,
    "delete": Delete,
    "update": update.Update,
    "update.add": update.Add,
    "update.remove": update.Remove,
    "update.put": update.Put,
    "grant": credential.Grant,
    "revoke": credential.Revoke,
    "class.create": oclass.Create,
    "class.drop": oclass.Drop,
    "class.alter": oclass.Alter,
    "references.find": reference.Find,
    "property.create": property.Create,
    "property.drop": property.Drop,
    "property.alter": property.Alter,
    "index.drop": index.Drop,
    "index.create": index.Create,
    "index.count": index.Count,
    "index.put": index.Put,
    "index.remove": index.Remove,
    "index.lookup": index.Lookup,
    "link": Link,
})
