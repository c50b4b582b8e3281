"""Serialize a PodcastDocument to RSS XML with ElementTree."""

import xml.etree.ElementTree as ET

from podcast_feed.podcast import feed_xml


class CData(str):
    """Text that is written out as a CDATA section."""


_escape_cdata = ET._escape_cdata


# ElementTree has no CDATA support, so CData text bypasses escaping
def _escape_cdata_section(text):
    if isinstance(text, CData):
        # "]]>" cannot appear inside a section, split it across two
        return "<![CDATA[%s]]>" % text.replace("]]>", "]]]]><![CDATA[>")
    return _escape_cdata(text)


ET._escape_cdata = _escape_cdata_section


def _text(parent, tag, value):
    ET.SubElement(parent, tag).text = value


def _optional(parent, tag, value):
    # Optional scalars are left out entirely when empty or zero
    if value:
        _text(parent, tag, str(value))


def _image(parent, image):
    element = ET.SubElement(parent, "image")
    _text(element, "url", image.url)
    _text(element, "title", image.title)
    _text(element, "link", image.link)
    _optional(element, "description", image.description)
    _optional(element, "width", image.width)
    _optional(element, "height", image.height)


def _text_input(parent, text_input):
    element = ET.SubElement(parent, "textInput")
    _text(element, "title", text_input.title)
    _text(element, "description", text_input.description)
    _text(element, "name", text_input.name)
    _text(element, "link", text_input.link)


def _itunes_summary(parent, summary):
    _text(parent, "itunes:summary", CData(summary.text))


def _itunes_image(parent, image):
    ET.SubElement(parent, "itunes:image", href=image.href)


def item_element(parent, item):
    """Append an <item> for a PodcastItem to parent."""
    element = ET.SubElement(parent, "item")
    _text(element, "title", item.title)
    _text(element, "link", item.link)
    _text(element, "description", item.description)
    _optional(element, "category", item.category)
    _optional(element, "comments", item.comments)
    _optional(element, "guid", item.guid)
    _optional(element, "pubDate", item.pub_date)
    _optional(element, "source", item.source)
    _optional(element, "author", item.author)

    if item.enclosure is not None:
        ET.SubElement(
            element,
            "enclosure",
            url=item.enclosure.url,
            length=item.enclosure.length,
            type=item.enclosure.type,
        )

    _optional(element, "itunes:author", item.itunes_author)
    _optional(element, "itunes:subtitle", item.itunes_subtitle)
    _optional(element, "itunes:duration", item.itunes_duration)
    _optional(element, "itunes:explicit", item.itunes_explicit)
    _optional(element, "itunes:isClosedCaptioned", item.itunes_is_closed_captioned)
    _optional(element, "itunes:order", item.itunes_order)

    if item.itunes_summary is not None:
        _itunes_summary(element, item.itunes_summary)
    if item.itunes_image is not None:
        _itunes_image(element, item.itunes_image)
    return element


def channel_element(parent, channel):
    """Append a <channel>, with all of its items, for a PodcastChannel to parent."""
    element = ET.SubElement(parent, "channel")
    _text(element, "title", channel.title)
    _text(element, "link", channel.link)
    _text(element, "description", channel.description)
    _optional(element, "category", channel.category)
    _optional(element, "cloud", channel.cloud)
    _optional(element, "copyright", channel.copyright)
    _optional(element, "docs", channel.docs)
    _optional(element, "generator", channel.generator)
    _optional(element, "language", channel.language)
    _optional(element, "lastBuildDate", channel.last_build_date)
    _optional(element, "managingEditor", channel.managing_editor)
    _optional(element, "pubDate", channel.pub_date)
    _optional(element, "rating", channel.rating)
    _optional(element, "webMaster", channel.web_master)
    _optional(element, "ttl", channel.ttl)
    _optional(element, "skipHours", channel.skip_hours)
    _optional(element, "skipDays", channel.skip_days)

    if channel.image is not None:
        _image(element, channel.image)
    if channel.text_input is not None:
        _text_input(element, channel.text_input)
    if channel.atom_link is not None:
        ET.SubElement(
            element,
            "atom:link",
            href=channel.atom_link.href,
            rel=channel.atom_link.rel,
            type=channel.atom_link.type,
        )

    _optional(element, "itunes:author", channel.itunes_author)
    _optional(element, "itunes:subtitle", channel.itunes_subtitle)
    _optional(element, "itunes:block", channel.itunes_block)
    _optional(element, "itunes:duration", channel.itunes_duration)
    _optional(element, "itunes:explicit", channel.itunes_explicit)
    _optional(element, "itunes:complete", channel.itunes_complete)
    _optional(element, "itunes:new-feed-url", channel.itunes_new_feed_url)

    if channel.itunes_summary is not None:
        _itunes_summary(element, channel.itunes_summary)
    if channel.itunes_image is not None:
        _itunes_image(element, channel.itunes_image)
    if channel.itunes_owner is not None:
        owner = ET.SubElement(element, "itunes:owner")
        _text(owner, "itunes:name", channel.itunes_owner.name)
        _text(owner, "itunes:email", channel.itunes_owner.email)
    if channel.itunes_category is not None:
        ET.SubElement(element, "itunes:category", text=channel.itunes_category.text)

    for item in channel.items:
        item_element(element, item)
    return element


def document_element(document):
    """Build the <rss> root element for a PodcastDocument.

    Args:
        document (PodcastDocument): The document to encode.

    Returns:
        xml.etree.ElementTree.Element: The root element.
    """
    rss = ET.Element(
        "rss",
        version=document.version,
        attrib={
            "xmlns:atom": document.xmlns_atom,
            "xmlns:itunes": document.xmlns_itunes,
        },
    )
    channel_element(rss, document.channel)
    return rss


def to_xml(document, pretty=True):
    """Encode a PodcastDocument as UTF-8 XML bytes, with an XML declaration."""
    rss = document_element(document)
    if pretty:
        ET.indent(rss)
    return ET.tostring(rss, encoding="UTF-8", xml_declaration=True)


def write_xml(document, output_file_path):
    """Write a PodcastDocument to output_file_path."""
    with open(output_file_path, "wb") as file:
        file.write(to_xml(document))


def to_podcast(feed):
    """Map a generic Feed and encode it in one step."""
    return to_xml(feed_xml(feed))
