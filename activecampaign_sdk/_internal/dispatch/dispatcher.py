"""Table-driven routing of call names onto Connector capabilities."""

import inspect
from collections.abc import Callable, Iterable
from typing import Any

from activecampaign_sdk.exceptions import ActiveCampaignConfigError, MissingMethodError


def normalize_method_name(name: str) -> str:
    """Translate a call name into a capability identifier.

    ``contact_list`` becomes ``contactList``. A trailing underscore, used for
    names that collide with Python builtins, is kept: ``list_`` stays
    ``list_``. Names without underscores pass through unchanged.

    Args:
        name: The call name.

    Returns:
        The camelCase identifier.
    """
    append_underscore = name.endswith("_")
    if append_underscore:
        name = name[:-1]

    first, *rest = name.split("_")
    identifier = first + "".join(token[:1].upper() + token[1:] for token in rest)

    if append_underscore:
        identifier += "_"
    return identifier


class Dispatcher:
    """Routes (name, args) calls to the capabilities of a target object.

    The routing table is built and validated once, when the dispatcher is
    created. Each capability is registered under its normalized identifier,
    so both ``contact_list`` and ``contactList`` reach the same method.
    """

    def __init__(self, target: Any, capabilities: Iterable[str]) -> None:
        """Build the routing table.

        Args:
            target: Object whose methods are the capabilities.
            capabilities: Attribute names of the capability methods.

        Raises:
            ActiveCampaignConfigError: If a capability is missing, not
                callable, or two capabilities share an identifier.
        """
        self._class_name = type(target).__name__
        self._table: dict[str, Callable[..., Any]] = {}
        self._arity: dict[str, int | None] = {}

        for attr in capabilities:
            method = getattr(target, attr, None)
            if not callable(method):
                raise ActiveCampaignConfigError(
                    f"Capability {attr} is not a method of {self._class_name}"
                )
            identifier = normalize_method_name(attr)
            if identifier in self._table:
                raise ActiveCampaignConfigError(
                    f"Capabilities collide on identifier {identifier}"
                )
            self._table[identifier] = method
            self._arity[identifier] = _positional_arity(method)

    @property
    def capabilities(self) -> list[str]:
        """Registered capability identifiers, sorted."""
        return sorted(self._table)

    def resolve(self, name: str) -> Callable[..., Any]:
        """Return the capability a call name routes to.

        Raises:
            MissingMethodError: If the name does not resolve. The error
                carries the name as given, not its normalized form.
        """
        return self._table[self._identifier(name)]

    def dispatch(self, name: str, *args: Any) -> Any:
        """Invoke the capability for ``name`` with ``args`` in order.

        Arguments beyond what the capability accepts positionally are dropped.
        """
        identifier = self._identifier(name)
        arity = self._arity[identifier]
        if arity is not None:
            args = args[:arity]
        return self._table[identifier](*args)

    def _identifier(self, name: str) -> str:
        identifier = normalize_method_name(name) if name else ""
        if identifier not in self._table:
            raise MissingMethodError(name, self._class_name)
        return identifier


def _positional_arity(method: Callable[..., Any]) -> int | None:
    """Number of positional parameters, or None if the method takes *args."""
    count = 0
    for param in inspect.signature(method).parameters.values():
        if param.kind is inspect.Parameter.VAR_POSITIONAL:
            return None
        if param.kind in (
            inspect.Parameter.POSITIONAL_ONLY,
            inspect.Parameter.POSITIONAL_OR_KEYWORD,
        ):
            count += 1
    return count
