"""Tree-to-graph conversion.

This module turns any binary tree into a GraphDescription. The tree is only
read: the builder follows each node's left and right references, asks the
node for its label and records one graph-node per distinct node object plus
one edge per parent -> child link.

Nodes are identified by object identity, not equality, so two equal values
in different nodes still get two graph-nodes, while a node reachable from two
parents is drawn once with two incoming edges.

Example:
    ```python
    builder = TreeGraphBuilder()
    description = builder.build(root)
    print(description.node_ids())   # ['n0', 'n1', ...]
    ```
"""

from typing import Any, Callable, Dict, List, Optional, Protocol, Set, Tuple, runtime_checkable

from bintreeviz.core.config import BuilderConfig
from bintreeviz.core.graph.description import ChildSide, GraphDescription
from bintreeviz.core.logging import LogComponent, get_logger, log_verbose

logger = get_logger(LogComponent.BUILDER)

LabelFn = Callable[[Any], str]


@runtime_checkable
class TreeNode(Protocol):
    """What the builder reads from a tree node.

    The label comes from ``str(node)`` unless a label function is given.
    """
    left: Optional["TreeNode"]
    right: Optional["TreeNode"]


class NodeIdentity:
    """Assigns graph-node ids to tree nodes by object identity.

    Ids are handed out in first-seen order (``n0``, ``n1``, ...). Each
    mapped node is held until the mapping is discarded so its ``id()``
    cannot be reused by another object mid-conversion.
    """

    def __init__(self, prefix: str = "n"):
        self.prefix = prefix
        self._ids: Dict[int, Tuple[Any, str]] = {}

    def get(self, node: Any) -> Optional[str]:
        entry = self._ids.get(id(node))
        return entry[1] if entry else None

    def assign(self, node: Any) -> Tuple[str, bool]:
        """Return the node's id and whether it was newly assigned."""
        existing = self.get(node)
        if existing is not None:
            return existing, False
        node_id = f"{self.prefix}{len(self._ids)}"
        self._ids[id(node)] = (node, node_id)
        return node_id, True

    def __contains__(self, node: Any) -> bool:
        return id(node) in self._ids

    def __len__(self) -> int:
        return len(self._ids)


class TreeGraphBuilder:
    """Builds a GraphDescription from a binary tree.

    Traversal is depth-first pre-order, left before right, on an explicit
    stack so deep or degenerate trees do not hit the recursion limit.
    """

    def __init__(self, config: Optional[BuilderConfig] = None, trace: bool = False):
        self.config = config or BuilderConfig()
        self.trace = trace

    def build(self, root: Optional[Any], label: Optional[LabelFn] = None) -> GraphDescription:
        """Convert the tree under ``root`` into a fresh GraphDescription.

        Args:
            root: Root node, or None for an empty tree
            label: Optional function producing a node's label (default: str)

        Returns:
            The populated description; empty when ``root`` is None
        """
        label = label or str
        description = GraphDescription()
        if root is None:
            log_verbose(logger, "Empty tree, nothing to convert")
            return description

        identity = NodeIdentity(self.config.id_prefix)
        expanded: Set[str] = set()

        # (parent id, side, node); the root has no parent
        stack: List[Tuple[Optional[str], Optional[ChildSide], Any]] = [(None, None, root)]
        while stack:
            parent_id, side, node = stack.pop()
            node_id = self._ensure_node(description, identity, node, label)

            if parent_id is not None:
                description.add_edge(parent_id, node_id, side)
                if self.trace:
                    logger.debug(f"Edge {parent_id} -> {node_id} ({side.value})")

            # Shared subtrees are expanded once
            if node_id in expanded:
                continue
            expanded.add(node_id)

            left, right = self._children(node)
            if right is not None:
                stack.append((node_id, ChildSide.RIGHT, right))
            if left is not None:
                stack.append((node_id, ChildSide.LEFT, left))

        log_verbose(
            logger,
            f"Converted tree: {len(description.nodes)} nodes, {len(description.edges)} edges"
        )
        return description

    def _children(self, node: Any) -> Tuple[Optional[Any], Optional[Any]]:
        return (
            getattr(node, self.config.left_attr),
            getattr(node, self.config.right_attr),
        )

    def _ensure_node(
        self,
        description: GraphDescription,
        identity: NodeIdentity,
        node: Any,
        label: LabelFn
    ) -> str:
        node_id, created = identity.assign(node)
        if created:
            description.add_node(node_id, str(label(node)))
            if self.trace:
                logger.debug(f"Node {node_id}: {description.nodes[-1].label!r}")
        return node_id
