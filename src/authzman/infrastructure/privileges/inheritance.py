"""Rule-based privilege inheritance: which methods a method implies."""

from collections.abc import Mapping, Sequence

from authzman.domain.value_objects import PrivilegeMethod

DEFAULT_INHERITANCE_RULES: dict[str, list[str]] = {
    PrivilegeMethod.CREATE: [PrivilegeMethod.READ],
    PrivilegeMethod.UPDATE: [PrivilegeMethod.READ],
    PrivilegeMethod.DELETE: [PrivilegeMethod.READ],
    PrivilegeMethod.READ: [],
}


class RulePrivilegeInheritanceResolver:
    """Expands methods through a ``method -> implied methods`` rule table.

    Input may be a single method or a comma-joined list. Each method is
    followed by its implied methods, depth-first in rule order. The result
    holds no duplicates (first occurrence kept), so cyclic rules terminate.
    """

    def __init__(self, rules: Mapping[str, Sequence[str]] | None = None) -> None:
        source = DEFAULT_INHERITANCE_RULES if rules is None else rules
        self._rules: dict[str, list[str]] = {
            str(method): [str(m) for m in implied] for method, implied in source.items()
        }

    def inherited_methods(self, method: str) -> list[str]:
        result: list[str] = []
        seen: set[str] = set()
        for name in method.split(","):
            name = name.strip()
            if name:
                self._expand(name, result, seen)
        return result

    def _expand(self, method: str, result: list[str], seen: set[str]) -> None:
        if method in seen:
            return
        seen.add(method)
        result.append(method)
        for implied in self._rules.get(method, []):
            self._expand(implied, result, seen)
