"""Turn a generic feed into a podcast RSS 2.0 document."""

from podcast_feed.encoder import to_podcast, to_xml, write_xml
from podcast_feed.feed import Author, Feed, Item, ItunesFeed, ItunesItem, Link
from podcast_feed.podcast import (
    PodcastChannel,
    PodcastDocument,
    PodcastItem,
    any_time_format,
    enclosure_type,
    feed_xml,
    podcast_channel,
    podcast_item,
)

__version__ = "0.1.0"

__all__ = [
    "Author",
    "Feed",
    "Item",
    "ItunesFeed",
    "ItunesItem",
    "Link",
    "PodcastChannel",
    "PodcastDocument",
    "PodcastItem",
    "any_time_format",
    "enclosure_type",
    "feed_xml",
    "podcast_channel",
    "podcast_item",
    "to_podcast",
    "to_xml",
    "write_xml",
]
