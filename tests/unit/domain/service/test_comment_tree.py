"""Unit tests for comment tree assembly."""

import sys
from uuid import uuid4

from inkwell.domain.service import (
    assemble_comment_tree,
    collect_descendants,
    iter_nodes,
)
from inkwell.domain.value import CommentId, PostId
from tests.conftest import make_comment


def _ids(nodes):
    return [node.comment.id for node in nodes]


class TestAssembleCommentTree:
    """Tests for assemble_comment_tree."""

    def test_empty_input_gives_empty_forest(self):
        forest = assemble_comment_tree([])

        assert forest.roots == []
        assert forest.orphans == []
        assert forest.count() == 0

    def test_roots_and_replies(self):
        """Comments without a parent become roots, replies nest below them."""
        post_id = PostId(uuid4())
        first = make_comment(post_id, minutes=0)
        second = make_comment(post_id, minutes=1)
        reply = make_comment(post_id, parent_id=first.id, minutes=2)
        nested = make_comment(post_id, parent_id=reply.id, minutes=3)

        forest = assemble_comment_tree([first, second, reply, nested])

        assert _ids(forest.roots) == [first.id, second.id]
        assert _ids(forest.roots[0].replies) == [reply.id]
        assert _ids(forest.roots[0].replies[0].replies) == [nested.id]
        assert forest.roots[1].replies == []
        assert forest.count() == 4

    def test_root_count_matches_null_parents(self):
        post_id = PostId(uuid4())
        roots = [make_comment(post_id, minutes=i) for i in range(5)]
        replies = [
            make_comment(post_id, parent_id=roots[i % 5].id, minutes=10 + i)
            for i in range(7)
        ]

        forest = assemble_comment_tree([*roots, *replies])

        assert len(forest.roots) == 5
        assert forest.count() == 12

    def test_sibling_order_follows_input_order(self):
        post_id = PostId(uuid4())
        parent = make_comment(post_id, minutes=0)
        replies = [
            make_comment(post_id, parent_id=parent.id, minutes=i) for i in range(1, 6)
        ]

        forest = assemble_comment_tree([parent, *replies])

        assert _ids(forest.roots[0].replies) == [r.id for r in replies]

    def test_reply_listed_before_parent_is_still_attached(self):
        post_id = PostId(uuid4())
        parent = make_comment(post_id, minutes=5)
        reply = make_comment(post_id, parent_id=parent.id, minutes=1)

        forest = assemble_comment_tree([reply, parent])

        assert _ids(forest.roots) == [parent.id]
        assert _ids(forest.roots[0].replies) == [reply.id]

    def test_orphan_is_left_out_of_roots(self):
        """A reply whose parent is missing is reported, not attached."""
        post_id = PostId(uuid4())
        root = make_comment(post_id, minutes=0)
        reply = make_comment(post_id, parent_id=root.id, minutes=1)
        orphan = make_comment(post_id, parent_id=CommentId(uuid4()), minutes=2)

        forest = assemble_comment_tree([root, reply, orphan])

        assert _ids(forest.roots) == [root.id]
        assert _ids(forest.roots[0].replies) == [reply.id]
        assert _ids(forest.orphans) == [orphan.id]
        assert forest.count() == 2

    def test_replies_to_orphan_stay_with_orphan(self):
        post_id = PostId(uuid4())
        orphan = make_comment(post_id, parent_id=CommentId(uuid4()), minutes=0)
        reply = make_comment(post_id, parent_id=orphan.id, minutes=1)

        forest = assemble_comment_tree([orphan, reply])

        assert forest.roots == []
        assert _ids(forest.orphans) == [orphan.id]
        assert _ids(forest.orphans[0].replies) == [reply.id]

    def test_self_parent_is_reported_as_orphan(self):
        post_id = PostId(uuid4())
        looped = make_comment(post_id, minutes=0)
        looped = looped.model_copy(update={"parent_id": looped.id})

        forest = assemble_comment_tree([looped])

        assert forest.roots == []
        assert _ids(forest.orphans) == [looped.id]
        assert forest.orphans[0].replies == []

    def test_two_comment_cycle_is_reported_as_orphans(self):
        post_id = PostId(uuid4())
        a = make_comment(post_id, minutes=0)
        b = make_comment(post_id, parent_id=a.id, minutes=1)
        a = a.model_copy(update={"parent_id": b.id})
        root = make_comment(post_id, minutes=2)

        forest = assemble_comment_tree([a, b, root])

        assert _ids(forest.roots) == [root.id]
        assert _ids(forest.orphans) == [a.id]
        assert _ids(forest.orphans[0].replies) == [b.id]
        assert forest.orphans[0].replies[0].replies == []

    def test_deep_chain_does_not_hit_recursion_limit(self):
        post_id = PostId(uuid4())
        depth = sys.getrecursionlimit() * 3
        chain = [make_comment(post_id, minutes=0)]
        for i in range(1, depth):
            chain.append(make_comment(post_id, parent_id=chain[-1].id, minutes=i))

        forest = assemble_comment_tree(chain)

        assert len(forest.roots) == 1
        assert forest.count() == depth
        assert [n.comment.id for n in iter_nodes(forest.roots)] == [
            c.id for c in chain
        ]


class TestCollectDescendants:
    """Tests for collect_descendants."""

    def test_collects_transitive_replies(self):
        post_id = PostId(uuid4())
        root = make_comment(post_id, minutes=0)
        child_a = make_comment(post_id, parent_id=root.id, minutes=1)
        child_b = make_comment(post_id, parent_id=root.id, minutes=2)
        grandchild = make_comment(post_id, parent_id=child_a.id, minutes=3)
        unrelated = make_comment(post_id, minutes=4)

        descendants = collect_descendants(
            root.id, [root, child_a, child_b, grandchild, unrelated]
        )

        assert descendants == [child_a.id, child_b.id, grandchild.id]

    def test_leaf_has_no_descendants(self):
        post_id = PostId(uuid4())
        root = make_comment(post_id)

        assert collect_descendants(root.id, [root]) == []

    def test_cycle_terminates(self):
        post_id = PostId(uuid4())
        a = make_comment(post_id, minutes=0)
        b = make_comment(post_id, parent_id=a.id, minutes=1)
        a = a.model_copy(update={"parent_id": b.id})

        assert collect_descendants(a.id, [a, b]) == [b.id]
