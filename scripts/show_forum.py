#!/usr/bin/env python3
"""Print the Q&A tree of a discussion, with Logfire error tracking."""

import asyncio
import sys

import logfire

from forum.app import configure, open_forum


async def show(context_id: str) -> None:
    async with open_forum(context_id) as store:
        view = store.view()
        if view.message:
            print(view.message)
        for row in view.items:
            badge = " [Organizer]" if row.is_organizer else ""
            print(f"{'  ' * row.depth}- {row.author_display_name}{badge}: {row.body_html}")
            if row.attachment:
                print(f"{'  ' * row.depth}  attachment: {row.attachment.name} ({row.attachment.url})")
        for notification in store.drain_notifications():
            print(f"{notification.title}: {notification.description}", file=sys.stderr)


def main() -> int:
    if len(sys.argv) != 2:
        print("usage: show_forum.py <context_id>", file=sys.stderr)
        return 2

    configure()

    try:
        asyncio.run(show(sys.argv[1]))
        return 0
    except Exception as e:
        logfire.error(
            "Showing forum failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main())
