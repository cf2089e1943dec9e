"""Privilege inheritance port - methods implied by a method."""

from typing import Protocol


class PrivilegeInheritanceResolver(Protocol):
    """Port for resolving the methods a method privilege transitively implies."""

    def inherited_methods(self, method: str) -> list[str]: ...
