"""
BST and Heap Example

This example demonstrates:
1. Drawing a binary search tree built by repeated insertion
2. Keeping left and right children apart with show_child_side
3. Drawing an array-backed heap through a thin node view with
   differently named child attributes and a custom label
4. Inspecting the graph description without rendering
"""

from typing import List, Optional

from bintreeviz import BinaryTreeVisualizer, BuilderConfig, VisualizerConfig
from bintreeviz.core.logging import configure_logging, LogLevel, Colors

class BSTNode:
    """Binary search tree node."""

    def __init__(self, key: int):
        self.key = key
        self.left: Optional["BSTNode"] = None
        self.right: Optional["BSTNode"] = None

    def insert(self, key: int) -> None:
        side = "left" if key < self.key else "right"
        child = getattr(self, side)
        if child is None:
            setattr(self, side, BSTNode(key))
        else:
            child.insert(key)

    def __str__(self) -> str:
        return str(self.key)

class HeapView:
    """Read-only node view over position ``index`` of an array heap."""

    def __init__(self, heap: List[int], index: int = 0):
        self.heap = heap
        self.index = index

    def _child(self, index: int) -> Optional["HeapView"]:
        return HeapView(self.heap, index) if index < len(self.heap) else None

    @property
    def first(self) -> Optional["HeapView"]:
        return self._child(2 * self.index + 1)

    @property
    def second(self) -> Optional["HeapView"]:
        return self._child(2 * self.index + 2)

def main() -> None:
    configure_logging(default_level=LogLevel.INFO)

    bst = BSTNode(50)
    for key in [30, 70, 20, 40, 60, 80, 65, 85]:
        bst.insert(key)

    bst_config = VisualizerConfig(
        show_child_side=True,
        node_attrs={"shape": "circle"},
    )
    with BinaryTreeVisualizer(config=bst_config) as visualizer:
        description = visualizer.to_description(bst)
        print(f"{Colors.INFO}BST:{Colors.RESET} {len(description.nodes)} nodes, "
              f"{len(description.edges)} edges")
        visualizer.visualize(bst, "svg", "bst.svg")

    heap = [1, 3, 6, 5, 9, 8, 7]
    heap_config = VisualizerConfig(
        builder=BuilderConfig(left_attr="first", right_attr="second", id_prefix="h"),
        node_attrs={"shape": "box"},
    )
    with BinaryTreeVisualizer(config=heap_config) as visualizer:
        visualizer.visualize(
            HeapView(heap),
            "png",
            "heap.png",
            label=lambda view: f"[{view.index}] {view.heap[view.index]}"
        )
        print(visualizer.to_source(HeapView(heap), label=lambda view: str(view.heap[view.index])))

if __name__ == "__main__":
    main()
