"""Comment tree assembly.

Turns the flat, creation-ordered comment list of one post into a forest of
nested nodes. Both passes are iterative so a linear reply chain of any depth
is safe.
"""

from collections import deque
from dataclasses import dataclass, field
from typing import Iterable, Iterator, Sequence

from inkwell.domain.model import Comment
from inkwell.domain.value import CommentId


@dataclass(eq=False)
class CommentNode:
    """Node in a post's comment tree.

    Wraps a comment and its direct replies in input order.
    """

    comment: Comment
    replies: list["CommentNode"] = field(default_factory=list)


@dataclass
class CommentForest:
    """Result of assembling a post's comments.

    Attributes:
        roots: Top-level comments with their replies nested below them
        orphans: Comments that could not be attached (unknown parent or a
            parent cycle), each with whatever replies hang below it
    """

    roots: list[CommentNode] = field(default_factory=list)
    orphans: list[CommentNode] = field(default_factory=list)

    def count(self) -> int:
        """Number of comments reachable from the roots."""
        return sum(1 for _ in iter_nodes(self.roots))


def assemble_comment_tree(comments: Sequence[Comment]) -> CommentForest:
    """Build a comment forest from a flat list.

    Algorithm:
    1. Index every comment as a node with an empty replies list
    2. Walk the list again, appending each comment to the root list
       (no parent) or to its parent's replies
    3. A comment whose parent is not in the index is an orphan and is kept
       out of the roots
    4. Nodes that are still unreachable form parent cycles; each cycle is cut
       at its earliest member, which is reported as an orphan

    Sibling order follows input order, so callers pass comments sorted by
    created_at ascending.

    Args:
        comments: Comments of a single post, oldest first

    Returns:
        Forest with roots for the public tree and orphans for diagnostics
    """
    nodes: dict[CommentId, CommentNode] = {}
    for comment in comments:
        nodes[comment.id] = CommentNode(comment=comment)

    forest = CommentForest()
    for comment in comments:
        node = nodes[comment.id]
        if comment.parent_id is None:
            forest.roots.append(node)
            continue

        parent = nodes.get(comment.parent_id)
        if parent is None:
            forest.orphans.append(node)
        else:
            parent.replies.append(node)

    reachable = {
        node.comment.id for node in iter_nodes([*forest.roots, *forest.orphans])
    }
    if len(reachable) == len(nodes):
        return forest

    for comment in comments:
        if comment.id in reachable:
            continue
        node = nodes[comment.id]
        parent = nodes[comment.parent_id]  # type: ignore[index]
        parent.replies.remove(node)
        forest.orphans.append(node)
        reachable.update(n.comment.id for n in iter_nodes([node]))

    return forest


def iter_nodes(roots: Iterable[CommentNode]) -> Iterator[CommentNode]:
    """Yield every node below the given roots in depth-first pre-order.

    Uses an explicit stack instead of recursion.
    """
    stack = list(reversed(list(roots)))
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.replies))


def collect_descendants(
    comment_id: CommentId, comments: Iterable[Comment]
) -> list[CommentId]:
    """Collect the IDs of every transitive reply to a comment.

    Args:
        comment_id: Comment whose descendants to collect
        comments: All comments of the comment's post

    Returns:
        Descendant IDs in breadth-first order (the comment itself excluded)
    """
    children: dict[CommentId, list[CommentId]] = {}
    for comment in comments:
        if comment.parent_id is not None:
            children.setdefault(comment.parent_id, []).append(comment.id)

    descendants: list[CommentId] = []
    seen = {comment_id}
    queue = deque([comment_id])
    while queue:
        current = queue.popleft()
        for child_id in children.get(current, []):
            if child_id in seen:
                continue
            seen.add(child_id)
            descendants.append(child_id)
            queue.append(child_id)

    return descendants
