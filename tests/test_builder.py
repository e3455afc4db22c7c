"""Tests EmailBuilder — feeds concurrents, annulation, timeout, lots, rendu."""
import asyncio

import pytest

from email_builder import (
    BuilderSettings,
    DocumentBuildTimeout,
    DocumentTree,
    EmailBuilder,
    FeedItem,
    InvalidManifest,
    RenderContext,
    Renderer,
    StaticFeedSource,
    UnknownBlockType,
    build_document,
)


# ── Helpers ───────────────────────────────────────────────────────────────────

def make_doc(*blocks, subject="Test"):
    return {"from": "news@example.com", "subject": subject, "content": {"blocks": list(blocks)}}


def feed(url, **props):
    return {"type": "feed", "source": url, "blocks": ["heading"], **props}


class GatedFeedSource:
    """Chaque fetch attend que tous les fetch attendus aient démarré."""

    def __init__(self, expected: int, delays: dict):
        self.expected = expected
        self.delays = delays
        self.started: list = []
        self.all_started = asyncio.Event()

    async def fetch(self, uri):
        self.started.append(uri)
        if len(self.started) == self.expected:
            self.all_started.set()
        await asyncio.wait_for(self.all_started.wait(), timeout=1)
        await asyncio.sleep(self.delays.get(uri, 0))
        return [FeedItem(title=uri)]


class HangingFeedSource:
    def __init__(self):
        self.started = asyncio.Event()
        self.cancelled = False

    async def fetch(self, uri):
        self.started.set()
        try:
            await asyncio.sleep(10)
        except asyncio.CancelledError:
            self.cancelled = True
            raise
        return []


class TitleRenderer:
    def render_document(self, tree, context):
        return "|".join(self.render_block(b, context) for b in tree.blocks)

    def render_block(self, block, context):
        return block.properties.get("content", block.type)


# ── Concurrence ───────────────────────────────────────────────────────────────

@pytest.mark.asyncio
async def test_independent_feeds_fetched_concurrently_in_document_order():
    source = GatedFeedSource(expected=2, delays={"http://a/feed": 0.05})
    builder = EmailBuilder(feed_source=source, settings=BuilderSettings())
    tree = await builder.build(make_doc(
        feed("http://a/feed"),
        {"type": "divider"},
        {"type": "container", "children": [feed("http://b/feed")]},
    ))
    assert sorted(source.started) == ["http://a/feed", "http://b/feed"]
    assert tree.blocks[0].children[0].properties["content"] == "http://a/feed"
    assert tree.blocks[1].type == "divider"
    assert tree.blocks[2].children[0].children[0].properties["content"] == "http://b/feed"


@pytest.mark.asyncio
async def test_failure_cancels_in_flight_fetch():
    source = HangingFeedSource()
    builder = EmailBuilder(feed_source=source, settings=BuilderSettings())
    with pytest.raises(UnknownBlockType):
        await builder.build(make_doc(feed("http://slow/feed"), {"type": "bogus"}))
    assert source.cancelled


@pytest.mark.asyncio
async def test_timeout_cancels_fetch_and_fails_document():
    source = HangingFeedSource()
    builder = EmailBuilder(feed_source=source, settings=BuilderSettings(build_timeout=0.05))
    with pytest.raises(DocumentBuildTimeout) as exc:
        await builder.build(make_doc(feed("http://slow/feed")))
    assert exc.value.seconds == 0.05
    assert source.cancelled


@pytest.mark.asyncio
async def test_cancelling_the_build_cancels_fetch():
    source = HangingFeedSource()
    builder = EmailBuilder(feed_source=source, settings=BuilderSettings())
    task = asyncio.create_task(builder.build(make_doc(feed("http://slow/feed"))))
    await asyncio.wait_for(source.started.wait(), timeout=1)
    task.cancel()
    with pytest.raises(asyncio.CancelledError):
        await task
    assert source.cancelled


# ── Lots ──────────────────────────────────────────────────────────────────────

@pytest.mark.asyncio
async def test_build_many_isolates_failures():
    builder = EmailBuilder(feed_source=StaticFeedSource(), settings=BuilderSettings())
    results = await builder.build_many([
        make_doc({"type": "heading", "content": "ok"}, subject="un"),
        make_doc({"type": "bogus"}, subject="deux"),
        make_doc(subject="trois"),
    ])
    assert isinstance(results[0], DocumentTree)
    assert isinstance(results[1], UnknownBlockType)
    assert results[2].subject == "trois"


@pytest.mark.asyncio
async def test_build_many_reports_malformed_manifest():
    builder = EmailBuilder(feed_source=StaticFeedSource(), settings=BuilderSettings())
    results = await builder.build_many([
        make_doc({"type": "heading", "content": "ok"}),
        make_doc({"content": "sans type"}),
        "{pas du json",
    ])
    assert isinstance(results[0], DocumentTree)
    assert isinstance(results[1], InvalidManifest)
    assert isinstance(results[2], InvalidManifest)
    assert results[1].to_dict()["kind"] == "invalid_manifest"


@pytest.mark.asyncio
async def test_build_raises_invalid_manifest():
    builder = EmailBuilder(feed_source=StaticFeedSource(), settings=BuilderSettings())
    with pytest.raises(InvalidManifest):
        await builder.build({"subject": "sans expéditeur"})


@pytest.mark.asyncio
async def test_build_many_does_not_block_on_slow_document():
    source = GatedFeedSource(expected=2, delays={})
    builder = EmailBuilder(feed_source=source, settings=BuilderSettings())
    results = await builder.build_many([make_doc(feed("http://a/feed")), make_doc(feed("http://b/feed"))])
    assert [r.blocks[0].children[0].properties["content"] for r in results] == ["http://a/feed", "http://b/feed"]


# ── Validation hors-ligne ─────────────────────────────────────────────────────

@pytest.mark.asyncio
async def test_validate_does_not_fetch():
    source = HangingFeedSource()
    builder = EmailBuilder(feed_source=source, settings=BuilderSettings())
    tree = await builder.validate(make_doc({"type": "heading"}, feed("http://slow/feed")))
    assert [b.type for b in tree.blocks] == ["heading"]
    assert not source.started.is_set()


@pytest.mark.asyncio
async def test_validate_reports_errors():
    builder = EmailBuilder(feed_source=StaticFeedSource(), settings=BuilderSettings())
    with pytest.raises(UnknownBlockType):
        await builder.validate(make_doc({"type": "bogus"}))


# ── Rendu ─────────────────────────────────────────────────────────────────────

def test_title_renderer_satisfies_protocol():
    assert isinstance(TitleRenderer(), Renderer)


@pytest.mark.asyncio
async def test_render_hands_filtered_tree_to_renderer():
    builder = EmailBuilder(feed_source=StaticFeedSource(), settings=BuilderSettings())
    doc = make_doc(
        {"type": "heading", "content": "Bonjour"},
        {"type": "html", "content": "Mobile", "visibility": {"devices": ["mobile"]}},
        {"type": "html", "content": "Desktop", "visibility": {"devices": ["desktop"]}},
    )
    html = await builder.render(doc, TitleRenderer(), RenderContext(device="desktop"))
    assert html == "Bonjour|Desktop"


@pytest.mark.asyncio
async def test_build_document_shortcut():
    tree = await build_document(
        make_doc({"type": "spacer"}),
        feed_source=StaticFeedSource(),
        settings=BuilderSettings(),
    )
    assert tree.blocks[0].properties["height"] == 16
