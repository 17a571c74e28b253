"""
Binary Tree Example

Builds a small three-level tree and renders it to binary_tree_test.svg with
the default hierarchical layout.
"""

from bintreeviz import BinaryTreeVisualizer, TreeVizError
from bintreeviz.core.logging import (
    configure_logging,
    LogLevel,
    LogComponent,
    Colors,
    get_logger
)

class Node:
    """Binary tree node labelled by its value."""

    def __init__(self, value: str):
        self.left = None
        self.right = None
        self.value = value

    def __str__(self) -> str:
        return self.value

def build_tree() -> Node:
    root = Node("root")
    root.left = Node("left")
    root.right = Node("right")
    root.left.left = Node("left.left")
    root.left.right = Node("left.right")
    root.right.left = Node("right.left")
    root.right.right = Node("right.right")
    return root

def main() -> None:
    configure_logging(
        default_level=LogLevel.INFO,
        component_levels={
            LogComponent.VISUALIZER: LogLevel.STAGE,
            LogComponent.ENGINE: LogLevel.INFO,
        }
    )
    logger = get_logger(LogComponent.VISUALIZER)

    try:
        with BinaryTreeVisualizer() as visualizer:
            path = visualizer.visualize(build_tree(), "svg", "binary_tree_test.svg")
        print(f"\n{Colors.SUCCESS}Binary tree has been visualized to '{path}'{Colors.RESET}")
    except TreeVizError as e:
        logger.error(f"Visualization failed: {e}")
        raise

if __name__ == "__main__":
    main()
