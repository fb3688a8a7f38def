#!/usr/bin/env python3
"""Basic usage of traversal-builder.

This example demonstrates:
- Walking a content tree with the default configuration
- Limiting the walk by depth and by accepted nodes
- Custom accept predicates with a deny callback
- Stopping a walk early with break_()
"""

import logging
import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from traversalbuilder import (
    ARTICLE_TYPE,
    FOLDER_TYPE,
    PAGE_TYPE,
    SITE_TYPE,
    TraversalBuilder,
    collect_accepted,
)
from traversalbuilder.testing import build_tree


def make_site():
    return build_tree(("Intranet", SITE_TYPE, [
        ("Start", PAGE_TYPE, [
            ("Welcome", ARTICLE_TYPE),
        ]),
        ("News", FOLDER_TYPE, [
            ("2024", FOLDER_TYPE, [
                ("Launch", ARTICLE_TYPE),
                ("Merger", ARTICLE_TYPE),
            ]),
            ("Archive notice", ARTICLE_TYPE),
        ]),
        ("Contact", PAGE_TYPE),
    ]))


def demo_default(site):
    print("\n=== Default configuration ===")
    names = [node.name() for node in collect_accepted(site)]
    print("Accepted:", ", ".join(names))


def demo_limits(site):
    print("\n=== Limits ===")
    print("max_depth=1:", [n.name() for n in collect_accepted(site, max_depth=1)])
    print("max_nodes=3:", [n.name() for n in collect_accepted(site, max_nodes=3)])


def demo_predicates(site):
    print("\n=== Custom accept predicate ===")
    report = {"accepted": [], "denied": []}
    traversal = (TraversalBuilder()
                 .set_accept_callback(lambda node: node.primary_type() == ARTICLE_TYPE)
                 .set_callback(lambda node, ctx: ctx["accepted"].append(node.name()))
                 .set_deny_callback(lambda node, ctx: ctx["denied"].append(node.name()))
                 .build())
    traversal.traverse(site, report)
    print("Accepted:", report["accepted"])
    print("Denied:  ", report["denied"])


def demo_break(site):
    print("\n=== Stop at first article in News ===")
    found = []

    def callback(node, context):
        found.append(node.name())
        if node.primary_type() == ARTICLE_TYPE and len(found) > 1:
            traversal.break_()

    traversal = TraversalBuilder().set_callback(callback).build()
    traversal.traverse(site)
    print("Visited before break:", found)


def main():
    logging.basicConfig(level=logging.INFO)
    site = make_site()
    demo_default(site)
    demo_limits(site)
    demo_predicates(site)
    demo_break(site)


if __name__ == "__main__":
    main()
