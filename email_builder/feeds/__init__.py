"""Flux — interface source, source HTTP RSS/Atom, expanseur du bloc feed."""
from .source import FeedItem, FeedSource, StaticFeedSource, UnknownFeed
from .rss import FeedParseError, HttpFeedSource, parse_feed
from .expander import FEED, SYNTHESIZERS, child_policy, expand_feed

__all__ = [
    "FeedItem", "FeedSource", "StaticFeedSource", "UnknownFeed",
    "FeedParseError", "HttpFeedSource", "parse_feed",
    "FEED", "SYNTHESIZERS", "child_policy", "expand_feed",
]
