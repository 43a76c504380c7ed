"""Binary search tree with on-demand rebalancing.

``BalancedBST`` stores unique, orderable values.  The tree is built
height-balanced from an arbitrary input collection, mutated through ``insert``
and ``delete`` without any automatic rotations, and can be rebuilt into a
minimal-height shape on request with ``rebalance``.

The public surface consists of:

* ``Node`` – a ``@dataclass`` holding a value and optional left/right children.
* ``BalancedBST`` – the tree itself with point operations, traversals and
  height/depth/balance queries.
* ``DeleteStatus`` – the outcome reported by ``BalancedBST.delete``; removing a
  missing value is an expected condition rather than an error.
* ``build_balanced`` – midpoint construction over a sorted sequence, shared by
  the constructor and ``rebalance``.

Everything except the midpoint builder walks the tree iteratively so that
degenerate shapes produced by sorted insert sequences cannot exhaust the
interpreter stack.  The builder only recurses ``log2(n)`` levels deep.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
import enum
import logging
from typing import (
    Any,
    Callable,
    Deque,
    Generic,
    Iterable,
    Iterator,
    List,
    Optional,
    Sequence,
    TypeVar,
    Union,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

__all__ = [
    "BalancedBST",
    "DeleteStatus",
    "Node",
    "build_balanced",
]


@dataclass(slots=True, eq=False)
class Node(Generic[T]):
    """Tree node owning its optional left and right subtrees."""

    value: T
    left: Optional["Node[T]"] = None
    right: Optional["Node[T]"] = None

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


class DeleteStatus(enum.Enum):
    """Result of :meth:`BalancedBST.delete`."""

    DELETED = "deleted"
    NOT_FOUND = "not_found"

    def __bool__(self) -> bool:
        return self is DeleteStatus.DELETED


class _RootMarker:
    __slots__ = ()

    def __repr__(self) -> str:  # pragma: no cover - debugging aid
        return "<root>"


_ROOT = _RootMarker()


def build_balanced(
    values: Sequence[T], start: int = 0, end: Optional[int] = None
) -> Optional[Node[T]]:
    """Build a minimal-height subtree from sorted ``values[start:end + 1]``.

    The midpoint rounds down, so for an even-sized range the extra element ends
    up in the right half and the left half is never larger than the right.  An
    empty range yields ``None``.
    """

    if end is None:
        end = len(values) - 1
    if start > end:
        return None

    mid = (start + end) // 2
    node = Node(values[mid])
    node.left = build_balanced(values, start, mid - 1)
    node.right = build_balanced(values, mid + 1, end)
    return node


def _unique_sorted(values: Iterable[T]) -> List[T]:
    """Return *values* sorted ascending with equal keys collapsed.

    Two values are the same key when neither is less than the other, which is
    the rule the tree itself uses, so values need not be hashable.
    """

    unique: List[T] = []
    for value in sorted(values):
        if not unique or unique[-1] < value:
            unique.append(value)
    return unique


def _subtree_height(node: Optional[Node[Any]]) -> int:
    """Return the height of *node*, counting edges; ``-1`` for ``None``."""

    if node is None:
        return -1

    height = -1
    level: List[Node[Any]] = [node]
    while level:
        height += 1
        level = [
            child
            for parent in level
            for child in (parent.left, parent.right)
            if child is not None
        ]
    return height


class BalancedBST(Generic[T]):
    """Binary search tree over unique values with explicit rebalancing."""

    __slots__ = ("root", "_size")

    def __init__(self, values: Optional[Iterable[T]] = None) -> None:
        self.root: Optional[Node[T]] = None
        self._size = 0
        unique = _unique_sorted(values) if values is not None else []
        self.root = build_balanced(unique)
        self._size = len(unique)
        logger.debug("Built tree with %d unique values", self._size)

    # ------------------------------------------------------------------
    # Point operations
    # ------------------------------------------------------------------
    def insert(self, value: T) -> Node[T]:
        """Insert *value* and return the node that holds it.

        Inserting a value that is already present leaves the tree untouched and
        returns the existing node.  The tree is never rebalanced here.
        """

        if self.root is None:
            self.root = Node(value)
            self._size += 1
            return self.root

        node = self.root
        while True:
            if value < node.value:
                if node.left is None:
                    node.left = Node(value)
                    self._size += 1
                    return node.left
                node = node.left
            elif node.value < value:
                if node.right is None:
                    node.right = Node(value)
                    self._size += 1
                    return node.right
                node = node.right
            else:
                return node

    def delete(self, value: T) -> DeleteStatus:
        """Remove *value* from the tree.

        A missing value is reported through :attr:`DeleteStatus.NOT_FOUND` and
        leaves the structure unchanged.  Nodes with two children take the value
        of their in-order successor, whose own node is then spliced out of the
        right subtree.
        """

        parent: Optional[Node[T]] = None
        node = self.root
        while node is not None:
            if value < node.value:
                parent, node = node, node.left
            elif node.value < value:
                parent, node = node, node.right
            else:
                break

        if node is None:
            logger.info("Value not found in the tree: %r", value)
            return DeleteStatus.NOT_FOUND

        if node.left is not None and node.right is not None:
            successor_parent = node
            successor = node.right
            while successor.left is not None:
                successor_parent = successor
                successor = successor.left
            node.value = successor.value
            # The successor never has a left child.
            if successor_parent is node:
                successor_parent.right = successor.right
            else:
                successor_parent.left = successor.right
        else:
            child = node.left if node.left is not None else node.right
            if parent is None:
                self.root = child
            elif parent.left is node:
                parent.left = child
            else:
                parent.right = child

        self._size -= 1
        return DeleteStatus.DELETED

    def find(self, value: T) -> Optional[Node[T]]:
        """Return the node holding *value* or ``None`` when it is absent."""

        node = self.root
        while node is not None:
            if value < node.value:
                node = node.left
            elif node.value < value:
                node = node.right
            else:
                return node
        return None

    # ------------------------------------------------------------------
    # Traversals
    # ------------------------------------------------------------------
    def level_order(self) -> List[List[T]]:
        """Return values grouped by depth, root level first."""

        result: List[List[T]] = []
        queue: Deque[Node[T]] = deque()
        if self.root is not None:
            queue.append(self.root)

        while queue:
            level: List[T] = []
            for _ in range(len(queue)):
                node = queue.popleft()
                level.append(node.value)
                if node.left is not None:
                    queue.append(node.left)
                if node.right is not None:
                    queue.append(node.right)
            result.append(level)
        return result

    def preorder(self, callback: Optional[Callable[[T], Any]] = None) -> List[T]:
        """Return values in node/left/right order.

        When *callback* is supplied it is invoked with each value as the node
        is visited, before the value is appended to the result.
        """

        result: List[T] = []
        stack: List[Node[T]] = [self.root] if self.root is not None else []
        while stack:
            node = stack.pop()
            if callback is not None:
                callback(node.value)
            result.append(node.value)
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)
        return result

    def inorder(self) -> List[T]:
        """Return values in ascending order."""

        return list(self._iter_inorder())

    def postorder(self) -> List[T]:
        """Return values in left/right/node order."""

        result: List[T] = []
        stack: List[Node[T]] = [self.root] if self.root is not None else []
        while stack:
            node = stack.pop()
            result.append(node.value)
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
        result.reverse()
        return result

    def _iter_inorder(self) -> Iterator[T]:
        stack: List[Node[T]] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.value
            node = node.right

    # ------------------------------------------------------------------
    # Shape queries
    # ------------------------------------------------------------------
    def height(self, node: Union[Optional[Node[T]], _RootMarker] = _ROOT) -> int:
        """Return the height of *node* (the root by default).

        An empty subtree has height ``-1`` so that a single leaf has height
        ``0``.  The value is recomputed on every call.
        """

        if isinstance(node, _RootMarker):
            return _subtree_height(self.root)
        return _subtree_height(node)

    def depth(self, value: T) -> int:
        """Return the number of edges from the root to *value*.

        ``-1`` is returned exactly when the search falls off the tree without
        finding *value*.
        """

        depth = 0
        node = self.root
        while node is not None:
            if value < node.value:
                node = node.left
            elif node.value < value:
                node = node.right
            else:
                return depth
            depth += 1
        return -1

    def is_balanced(self) -> bool:
        """Return ``True`` when the root's subtree heights differ by at most one.

        Only the two subtrees hanging off the root are compared; use
        :func:`balanced_tree.invariants.is_height_balanced` to validate every
        node.
        """

        if self.root is None:
            return True
        left_height = _subtree_height(self.root.left)
        right_height = _subtree_height(self.root.right)
        return abs(left_height - right_height) <= 1

    def rebalance(self) -> None:
        """Rebuild the tree into minimal height from its in-order values."""

        values = self.inorder()
        self.root = build_balanced(values)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "Rebalanced %d values to height %d", len(values), _subtree_height(self.root)
            )

    # ------------------------------------------------------------------
    # Container protocol
    # ------------------------------------------------------------------
    def __len__(self) -> int:
        return self._size

    def __contains__(self, value: object) -> bool:
        return self.find(value) is not None  # type: ignore[arg-type]

    def __iter__(self) -> Iterator[T]:
        return self._iter_inorder()

    def __repr__(self) -> str:
        return f"BalancedBST({self.inorder()!r})"
