#!/usr/bin/env python3
"""
Example usage of JSON Value.

This script parses a small document and shows strict, optional and
default-valued access, typed binding and the two output modes.
"""

from dataclasses import dataclass
from typing import List

from json_value import AccessError, JsonOptional, JsonValue, NumberCoercionError


@dataclass
class Post:
    id: int
    title: str
    tags: List[str]


def main():
    """Main example function."""
    print("JSON Value Example")
    print("=" * 50)

    document = JsonValue.parse("""
    {
        "user": {"name": "Alice Johnson", "age": 30, "nickname": null},
        "posts": [
            {"id": 1, "title": "My First Post", "tags": ["introduction", "hello"]},
            {"id": 2, "title": "Learning Python", "tags": ["python"]}
        ],
        "limits": {"max_posts": 100, "ratio": 0.75}
    }
    """)

    # Strict access raises on anything unexpected
    user = document.get("user")
    print(f"Name: {user.get('name').as_string()}")
    print(f"Age: {user.get('age').as_int()}")

    try:
        document.get("posts").get(5)
    except AccessError as e:
        print(f"❌ Strict access failed: {e}")

    try:
        document.get("limits").get("ratio").as_int()
    except NumberCoercionError as e:
        print(f"❌ Strict conversion failed: {e}")

    # Optional and default-valued access never raise
    print(f"Ratio as int (optional): {document.get('limits').get('ratio').as_int_optional()}")
    print(f"Max users (default): {document.find('limits').find('max_users').as_int_or_default(10000)}")
    missing = document.find("posts").find(7).find("title")
    print(f"Missing title is empty optional: {missing is JsonOptional.EMPTY}")

    # Typed binding
    posts = document.get("posts").as_list_of(Post)
    for post in posts:
        print(f"   Post {post.id}: {post.title} {post.tags}")

    # Building new values leaves the original untouched
    updated = user.with_field("age", 31).without_field("nickname")

    print("\nCompact (nulls dropped):")
    print(user.stringify())
    print("\nCompact (nulls kept):")
    print(str(user))
    print("\nPretty:")
    print(updated.pretty_stringify(indent=2))


if __name__ == "__main__":
    main()
