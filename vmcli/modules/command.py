"""Ordered argument-vector builder shared by the module wrappers."""

from enum import Enum
from typing import Any, List


def _token(value: Any) -> str:
    if isinstance(value, Enum):
        value = value.value
    return str(value)


class CommandBuilder:
    """
    Accumulates vmcli argument tokens in order.

    >>> CommandBuilder("vm.vmx", "Power", "Start").add_flag("-p", True).build()
    ['vm.vmx', 'Power', 'Start', '-p']
    """

    def __init__(self, *tokens: Any):
        self._tokens: List[str] = []
        self.add(*tokens)

    def add(self, *tokens: Any) -> "CommandBuilder":
        """Append positional tokens."""
        self._tokens.extend(_token(token) for token in tokens)
        return self

    def add_flag(self, name: str, value: Any = True) -> "CommandBuilder":
        """
        Append a flag depending on its value.

        A bool adds just the flag name when true. None or a blank string adds
        nothing. Anything else adds the flag name followed by the value.
        """
        if isinstance(value, bool):
            if value:
                self._tokens.append(name)
        elif value is None or (isinstance(value, str) and not value.strip()):
            pass
        else:
            self._tokens.extend([name, _token(value)])
        return self

    def json_format(self) -> "CommandBuilder":
        """Ask vmcli for a JSON document on stdout."""
        return self.add("--format", "json")

    def build(self) -> List[str]:
        return list(self._tokens)

    def __len__(self) -> int:
        return len(self._tokens)

    def __repr__(self) -> str:
        return f"CommandBuilder({self._tokens!r})"
