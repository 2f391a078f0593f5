import asyncio

import pytest


def make_item(comment_id, author="Author", text="Hello", published_at="2024-01-01T00:00:00Z"):
    """Builds a commentThreads.list item with the nested snippet shape."""
    return {
        "id": comment_id,
        "snippet": {
            "topLevelComment": {
                "snippet": {
                    "authorDisplayName": author,
                    "authorProfileImageUrl": f"https://yt3.ggpht.com/{comment_id}.jpg",
                    "publishedAt": published_at,
                    "textDisplay": text,
                }
            }
        },
    }


def make_page(ids, next_page_token=None):
    page = {"items": [make_item(i, text=f"text {i}") for i in ids]}
    if next_page_token is not None:
        page["nextPageToken"] = next_page_token
    return page


class FakeFetcher:
    """
    Scripted remote-fetch collaborator.

    Each call pops the next scripted outcome: a payload dict is returned,
    an exception instance is raised. With gated=True every call waits on
    its own asyncio.Event before settling.
    """

    def __init__(self, outcomes, gated=False):
        self.outcomes = list(outcomes)
        self.calls = []
        self.gated = gated
        self.gates = []

    async def __call__(self, video_id, page_size, page_token):
        self.calls.append((video_id, page_size, page_token))
        outcome = self.outcomes.pop(0)
        if self.gated:
            gate = asyncio.Event()
            self.gates.append(gate)
            await gate.wait()
        else:
            await asyncio.sleep(0)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


@pytest.fixture
def item_factory():
    return make_item


@pytest.fixture
def page_factory():
    return make_page
