"""ScopeTracker: explicit stack of scope paths maintained during a tree walk."""

ROOT_SCOPE = "global"

type ScopePath = str


class ScopeTracker:
    """Tracks structural nesting as a stack of dot-joined scope paths.

    The stack always holds the root scope. Traversal code pushes when it enters
    a class, function, method or arrow function and pops when it leaves it.
    Unbalanced exits stop at the root instead of failing.
    """

    def __init__(self, root: ScopePath = ROOT_SCOPE) -> None:
        self._stack: list[ScopePath] = [root]

    @property
    def current_scope(self) -> ScopePath:
        return self._stack[-1]

    @property
    def depth(self) -> int:
        """Number of scopes above the root."""
        return len(self._stack) - 1

    def enter_scope(self, label: str) -> None:
        """Push label as a scope path of its own, e.g. ``class:Foo``."""
        self._stack.append(label)

    def enter_nested_scope(self, label: str) -> None:
        """Push a scope nested under the current one, e.g. ``class:Foo.bar``."""
        self._stack.append(f"{self.current_scope}.{label}")

    def exit_scope(self) -> None:
        if len(self._stack) > 1:
            self._stack.pop()

    def snapshot(self) -> list[ScopePath]:
        return list(self._stack)
