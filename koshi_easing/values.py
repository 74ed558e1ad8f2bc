"""Animated value definitions and the output limiting policy."""

import copy
from dataclasses import dataclass, fields, replace
from typing import Any, Dict, Mapping, Optional, Union

from .core.calc import escaped, restricted

# Defaults applied to unset fields
VALUE_DEFAULTS = {
    "current": None,
    "min": None,
    "max": None,
    "amp": 1.0,
    "escape_amp": 0.0,
    "round": False,
}

VALUES_KEY = "values"


@dataclass
class ValueDefinition:
    """Single animated value: seed, clamp bounds and overshoot damping."""
    current: Optional[float] = None
    min: Optional[float] = None
    max: Optional[float] = None
    amp: float = 1.0
    escape_amp: float = 0.0
    round: bool = False

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ValueDefinition":
        return cls().merge(data)

    def merge(self, incoming: Union["ValueDefinition", Mapping[str, Any]]) -> "ValueDefinition":
        """
        Return a copy with incoming fields applied over this one.

        A mapping only overrides the keys it holds. A ValueDefinition only
        overrides the fields it sets away from VALUE_DEFAULTS.

        Raises:
            ValueError: if a mapping holds an unknown field
        """
        if isinstance(incoming, ValueDefinition):
            incoming = {
                name: value
                for name, value in incoming.to_dict().items()
                if value != VALUE_DEFAULTS[name]
            }

        unknown = set(incoming) - set(VALUE_DEFAULTS)
        if unknown:
            raise ValueError(f"Unknown value definition fields: {sorted(unknown)}")
        return replace(self, **dict(incoming))

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {f.name: getattr(self, f.name) for f in fields(self)}


def limit(output: float, definition: Union[ValueDefinition, Mapping[str, Any]]) -> float:
    """
    Clamp output to the definition's bounds.

    A mapping definition accepts the keys current, min, max, amp,
    escape_amp and round; any other key is a ValueError.

    With a nonzero escape_amp the excess beyond the bound is scaled back in
    instead of dropped, e.g. limit(150, min=0, max=100, escape_amp=0.5) == 125.
    """
    if not isinstance(definition, ValueDefinition):
        definition = ValueDefinition.from_dict(definition)

    restricted_val = restricted(output, definition.min, definition.max)
    if definition.escape_amp:
        return escaped(restricted_val, output, definition.escape_amp)
    return restricted_val


class ActionRecord:
    """
    Named value definitions plus free-form declared properties.

    Example:
        action = ActionRecord({"duration": 300, "values": {"x": 0}})
        action.set({"values": {"x": {"max": 100, "escape_amp": 0.2}}})
        slower = action.extend({"duration": 600})
    """

    def __init__(self, props: Optional[Mapping[str, Any]] = None, default_value_prop: str = "current"):
        self.props: Dict[str, Any] = {}
        self.values: Dict[str, ValueDefinition] = {}
        if props:
            self.set(props, default_value_prop)

    def __repr__(self) -> str:
        return f"ActionRecord(props={self.props!r}, values={self.values!r})"

    def set(self, props: Mapping[str, Any], default_value_prop: str = "current") -> "ActionRecord":
        """
        Merge props into this record.

        Args:
            props: Top-level properties. The "values" key maps value names to
                   either a scalar or a partial definition (mapping or
                   ValueDefinition), merged over the existing one per field.
            default_value_prop: Field a bare scalar value is assigned to

        Returns:
            self, for chaining
        """
        for key, prop in props.items():
            if key == VALUES_KEY:
                self._merge_values(prop, default_value_prop)
            else:
                self.props[key] = prop
        return self

    def _merge_values(self, values: Mapping[str, Any], default_value_prop: str) -> None:
        for name, value in values.items():
            if not isinstance(value, (Mapping, ValueDefinition)):
                value = {default_value_prop: value}
            existing = self.values.get(name, ValueDefinition())
            self.values[name] = existing.merge(value)

    def extend(self, props: Optional[Mapping[str, Any]] = None) -> "ActionRecord":
        """New record combining this one with props. This record is unchanged."""
        record = ActionRecord()
        record.props = copy.deepcopy(self.props)
        record.values = {name: replace(d) for name, d in self.values.items()}
        if props:
            record.set(props)
        return record

    @staticmethod
    def limit(output: float, definition: Union[ValueDefinition, Mapping[str, Any]]) -> float:
        return limit(output, definition)

    def resolve(self, name: str, output: float) -> float:
        """Apply the named value's limits, and rounding if enabled."""
        definition = self.values[name]
        result = limit(output, definition)
        if definition.round:
            result = round(result)
        return result


def create_value_container(props: Optional[Mapping[str, Any]] = None) -> ActionRecord:
    """Create an ActionRecord from a partial property/value bag."""
    return ActionRecord(props)


__all__ = [
    "ValueDefinition",
    "ActionRecord",
    "VALUE_DEFAULTS",
    "create_value_container",
    "limit",
]
