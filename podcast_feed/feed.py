"""Generic, format-agnostic feed model."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional


@dataclass
class Link:
    href: str = ""
    rel: str = ""
    type: str = ""
    length: str = ""


@dataclass
class Author:
    name: str = ""
    email: str = ""


@dataclass
class ItunesFeed:
    """Feed-level podcast extension fields."""

    language: str = ""
    logo: str = ""
    category: str = ""
    author: str = ""
    email: str = ""
    explicit: str = ""
    complete: str = ""
    block: str = ""
    duration: str = ""
    new_feed_url: str = ""


@dataclass
class ItunesItem:
    """Item-level podcast extension fields."""

    author: str = ""
    subtitle: str = ""
    image: str = ""
    audio_href: str = ""
    audio_size: int = 0
    audio_type: str = ""


@dataclass
class Item:
    title: str = ""
    link: Optional[Link] = None
    description: str = ""
    id: str = ""
    author: Optional[Author] = None
    source: Optional[Link] = None
    created: Optional[datetime] = None
    updated: Optional[datetime] = None
    itunes: ItunesItem = field(default_factory=ItunesItem)


@dataclass
class Feed:
    title: str = ""
    link: Optional[Link] = None
    description: str = ""
    author: Optional[Author] = None
    copyright: str = ""
    subtitle: str = ""
    id: str = ""
    created: Optional[datetime] = None
    updated: Optional[datetime] = None
    items: List[Item] = field(default_factory=list)
    itunes: ItunesFeed = field(default_factory=ItunesFeed)

    def add(self, item):
        """Append an item to the feed."""
        self.items.append(item)
