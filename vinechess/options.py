"""Engine options as advertised and set over the UCI protocol."""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from typing import Callable, ClassVar, Iterator, Optional

_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class OptionError(ValueError):
    """An option value was rejected or an option name is unknown."""


Callback = Callable[["Option"], None]


class Option(ABC):
    """A named setting with a callback run whenever its value is set."""

    type_name: ClassVar[str] = ""

    def __init__(self, name: str, callback: Optional[Callback] = None) -> None:
        self.name = name
        self._callback = callback

    def _notify(self) -> None:
        if self._callback is not None:
            self._callback(self)

    @abstractmethod
    def set_value(self, text: str) -> None:
        """Parse and store a new value, raising OptionError if it is invalid."""

    @property
    @abstractmethod
    def value_text(self) -> str:
        """Current value as sent over the protocol."""

    def __str__(self) -> str:
        return f"option name {self.name} type {self.type_name} default {self.value_text}"


class IntegerOption(Option):
    """Integer ("spin") option bounded by a minimum and maximum."""

    type_name = "spin"

    def __init__(
        self,
        name: str,
        value: int,
        minimum: int,
        maximum: int,
        callback: Optional[Callback] = None,
    ) -> None:
        super().__init__(name, callback)
        self.value = value
        self.minimum = minimum
        self.maximum = maximum
        self._notify()

    def set_value(self, text: str) -> None:
        match = _LEADING_INT.match(text)
        new_value = int(match.group(1)) if match else None
        if (
            new_value is None
            or not _I32_MIN <= new_value <= _I32_MAX
            or not self.minimum <= new_value <= self.maximum
        ):
            raise OptionError(
                f"invalid value {text!r} for {self.name} "
                f"(expected {self.minimum} to {self.maximum})"
            )
        self.value = new_value
        self._notify()

    @property
    def value_text(self) -> str:
        return str(self.value)

    def __str__(self) -> str:
        return f"{super().__str__()} min {self.minimum} max {self.maximum}"


class BoolOption(Option):
    """Boolean ("check") option."""

    type_name = "check"

    def __init__(self, name: str, value: bool, callback: Optional[Callback] = None) -> None:
        super().__init__(name, callback)
        self.value = value
        self._notify()

    def set_value(self, text: str) -> None:
        lowered = text.lower()
        if lowered == "true":
            self.value = True
        elif lowered == "false":
            self.value = False
        else:
            raise OptionError(f"invalid value {text!r} for {self.name}")
        self._notify()

    @property
    def value_text(self) -> str:
        return "True" if self.value else "False"

    def __str__(self) -> str:
        return super().__str__()


class StringOption(Option):
    """Free-text ("string") option."""

    type_name = "string"

    def __init__(self, name: str, value: str, callback: Optional[Callback] = None) -> None:
        super().__init__(name, callback)
        self.value = value
        self._notify()

    def set_value(self, text: str) -> None:
        self.value = text
        self._notify()

    @property
    def value_text(self) -> str:
        return self.value

    def __str__(self) -> str:
        return super().__str__()


class Options:
    """Options keyed by case-insensitive name, listed in name order."""

    def __init__(self) -> None:
        self._options: dict[str, Option] = {}

    def add(self, option: Option) -> None:
        """Register an option; an option already present under that name is kept."""
        self._options.setdefault(option.name.lower(), option)

    def get(self, name: str) -> Option:
        """Look up an option by name, ignoring case."""
        try:
            return self._options[name.lower()]
        except KeyError:
            raise OptionError(f"option {name!r} not found") from None

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.lower() in self._options

    def __len__(self) -> int:
        return len(self._options)

    def __iter__(self) -> Iterator[Option]:
        for key in sorted(self._options):
            yield self._options[key]

    def __str__(self) -> str:
        return "".join(f"{option}\n" for option in self)