"""Mapping of a generic feed onto the RSS 2.0 + iTunes podcast document."""

from dataclasses import dataclass, field
from datetime import timezone
from email.utils import format_datetime
from typing import List, Optional

from podcast_feed.feed import Feed

ATOM_NS = "http://www.w3.org/2005/Atom"
ITUNES_NS = "http://www.itunes.com/dtds/podcast-1.0.dtd"

ENCLOSURE_TYPES = {
    "m4a": "audio/x-m4a",
    "m4v": "video/x-m4v",
    "mp4": "video/mp4",
    "mp3": "audio/mpeg",
    "mov": "video/quicktime",
    "pdf": "application/pdf",
    "epub": "document/x-epub",
}
DEFAULT_ENCLOSURE_TYPE = "application/octet-stream"


# iTunes blocks
@dataclass
class ItunesOwner:
    name: str = ""
    email: str = ""


@dataclass
class ItunesCategory:
    text: str = ""


@dataclass
class ItunesSummary:
    text: str = ""


@dataclass
class ItunesImage:
    href: str = ""


# RSS blocks
@dataclass
class PodcastImage:
    url: str = ""
    title: str = ""
    link: str = ""
    description: str = ""
    width: int = 0
    height: int = 0


@dataclass
class PodcastAtomLink:
    href: str = ""
    rel: str = ""
    type: str = ""


@dataclass
class PodcastTextInput:
    title: str = ""
    description: str = ""
    name: str = ""
    link: str = ""


@dataclass
class PodcastEnclosure:
    url: str = ""
    length: str = ""
    type: str = ""


@dataclass
class PodcastItem:
    title: str = ""
    link: str = ""
    description: str = ""
    category: str = ""
    comments: str = ""
    guid: str = ""  # item id
    pub_date: str = ""  # created or updated
    source: str = ""
    author: str = ""
    enclosure: Optional[PodcastEnclosure] = None
    itunes_author: str = ""
    itunes_subtitle: str = ""
    itunes_duration: str = ""
    itunes_explicit: str = ""
    itunes_is_closed_captioned: str = ""
    itunes_order: str = ""
    itunes_summary: Optional[ItunesSummary] = None
    itunes_image: Optional[ItunesImage] = None


@dataclass
class PodcastChannel:
    title: str = ""
    link: str = ""
    description: str = ""
    category: str = ""
    cloud: str = ""
    copyright: str = ""
    docs: str = ""
    generator: str = ""
    language: str = ""
    last_build_date: str = ""  # updated
    managing_editor: str = ""  # author
    pub_date: str = ""  # created or updated
    rating: str = ""
    web_master: str = ""
    ttl: int = 0
    skip_hours: str = ""
    skip_days: str = ""
    image: Optional[PodcastImage] = None
    text_input: Optional[PodcastTextInput] = None
    atom_link: Optional[PodcastAtomLink] = None
    items: List[PodcastItem] = field(default_factory=list)
    itunes_author: str = ""
    itunes_subtitle: str = ""
    itunes_block: str = ""
    itunes_duration: str = ""
    itunes_explicit: str = ""
    itunes_complete: str = ""
    itunes_new_feed_url: str = ""
    itunes_summary: Optional[ItunesSummary] = None
    itunes_image: Optional[ItunesImage] = None
    itunes_owner: Optional[ItunesOwner] = None
    itunes_category: Optional[ItunesCategory] = None


@dataclass
class PodcastDocument:
    """Root <rss> envelope around a single channel."""

    channel: PodcastChannel
    version: str = "2.0"
    xmlns_atom: str = ATOM_NS
    xmlns_itunes: str = ITUNES_NS


def enclosure_type(token):
    """Resolve a short media type token to its MIME type.

    Args:
        token (str): One of m4a, m4v, mp4, mp3, mov, pdf or epub.

    Returns:
        str: The MIME type, or application/octet-stream for anything else.
    """
    return ENCLOSURE_TYPES.get(token, DEFAULT_ENCLOSURE_TYPE)


def any_time_format(*times):
    """Format the first timestamp that is set as an RFC 1123 date.

    Args:
        *times (datetime): Candidates, earlier ones preferred. ``None`` is unset.

    Returns:
        str: e.g. ``Mon, 02 Jan 2006 15:04:05 -0700``, or ``""`` when every
        candidate is unset.
    """
    for t in times:
        if t is None:
            continue
        # Naive datetimes are taken as UTC
        if t.tzinfo is None:
            t = t.replace(tzinfo=timezone.utc)
        return format_datetime(t)
    return ""


def podcast_item(item):
    """Build a PodcastItem from a generic Item."""
    itunes = item.itunes
    podcast = PodcastItem(
        title=item.title,
        link=item.link.href if item.link is not None else "",
        description=item.description,
        guid=item.id,
        pub_date=any_time_format(item.created, item.updated),
        itunes_author=itunes.author,
        itunes_subtitle=itunes.subtitle,
        itunes_summary=ItunesSummary(text=item.description),
        itunes_image=ItunesImage(href=itunes.image),
    )
    if item.source is not None:
        podcast.source = item.source.href

    if itunes.audio_size > 0 or itunes.audio_type != "":
        podcast.enclosure = PodcastEnclosure(
            url=itunes.audio_href,
            length=str(itunes.audio_size),
            type=enclosure_type(itunes.audio_type),
        )
    if item.author is not None:
        podcast.author = item.author.name

    return podcast


def managing_editor(author):
    """Compose the managingEditor value, ``email (name)``."""
    if author is None:
        return ""
    if author.name:
        return f"{author.email} ({author.name})"
    return author.email


def podcast_channel(feed):
    """Build a PodcastChannel, with all of its items, from a generic Feed.

    Args:
        feed (Feed): The source feed. It is only read.

    Returns:
        PodcastChannel: A freshly built channel. The image, atom link, summary,
        iTunes image, owner and category blocks are always present.
    """
    itunes = feed.itunes
    link = feed.link.href if feed.link is not None else ""
    rel = feed.link.rel if feed.link is not None else ""
    link_type = feed.link.type if feed.link is not None else ""

    channel = PodcastChannel(
        title=feed.title,
        link=link,
        description=feed.description,
        managing_editor=managing_editor(feed.author),
        pub_date=any_time_format(feed.created, feed.updated),
        last_build_date=any_time_format(feed.updated),
        copyright=feed.copyright,
        language=itunes.language,
        image=PodcastImage(title=feed.title, link=link, url=itunes.logo),
        atom_link=PodcastAtomLink(href=link, rel=rel, type=link_type),
        itunes_author=itunes.author,
        itunes_subtitle=feed.subtitle,
        itunes_block=itunes.block,
        itunes_duration=itunes.duration,
        itunes_explicit=itunes.explicit,
        itunes_complete=itunes.complete,
        itunes_new_feed_url=itunes.new_feed_url,
        itunes_summary=ItunesSummary(text=feed.description),
        itunes_image=ItunesImage(href=itunes.logo),
        itunes_owner=ItunesOwner(name=itunes.author, email=itunes.email),
        itunes_category=ItunesCategory(text=itunes.category),
    )
    for item in feed.items:
        channel.items.append(podcast_item(item))
    return channel


def feed_xml(source):
    """Wrap a channel (or a generic Feed, mapped first) in the <rss> document."""
    if isinstance(source, Feed):
        source = podcast_channel(source)
    return PodcastDocument(channel=source)
