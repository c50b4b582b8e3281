"""Load a YAML feed definition into the generic feed model."""

from datetime import date, datetime

import markdown
import yaml

from podcast_feed.feed import Author, Feed, Item, ItunesFeed, ItunesItem, Link

ITUNES_FEED_FIELDS = [
    "language",
    "logo",
    "category",
    "author",
    "email",
    "explicit",
    "complete",
    "block",
    "duration",
    "new_feed_url",
]
ITUNES_ITEM_FIELDS = ["author", "subtitle", "image", "audio_href", "audio_type"]


def read_feed_config(yaml_file_path):
    """Read a feed definition from a YAML file.

    Args:
        yaml_file_path (str): Path to the YAML file.

    Returns:
        dict: The parsed configuration.
    """
    with open(yaml_file_path, "r", encoding="utf-8") as file:
        return yaml.safe_load(file)


def parse_date(value):
    """Turn an ISO 8601 string (or a date YAML already parsed) into a datetime."""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    # Replace 'Z' with '+00:00' for Python < 3.11 compatibility
    return datetime.fromisoformat(str(value).replace("Z", "+00:00"))


def is_valid_iso_date(value):
    """Check if a value can be read as a date"""
    try:
        parse_date(value)
        return True
    except (TypeError, ValueError):
        return False


def format_description(description):
    """Convert a Markdown description to HTML."""
    return markdown.markdown(description)


def _link(value):
    # Links are either a bare URL or a mapping with href/rel/type
    if not value:
        return None
    if isinstance(value, dict):
        return Link(
            href=value.get("href", ""),
            rel=value.get("rel", ""),
            type=value.get("type", ""),
            length=str(value.get("length", "")),
        )
    return Link(href=str(value))


def _author(value):
    if not value:
        return None
    return Author(name=value.get("name", ""), email=value.get("email", ""))


def _string(value):
    # YAML reads yes/no/true/false as booleans
    if isinstance(value, bool):
        return "yes" if value else "no"
    if value is None:
        return ""
    return str(value)


def _strings(section, fields):
    section = section or {}
    return {name: _string(section.get(name)) for name in fields}


def _check_date(errors, where, section, field):
    if section.get(field) not in (None, "") and not is_valid_iso_date(section[field]):
        errors.append(
            f"{where}: Invalid {field} '{section[field]}' (must be ISO format like '2023-01-15T10:00:00Z')"
        )


def _check_link(errors, where, section, field):
    value = section.get(field)
    if isinstance(value, dict):
        if not isinstance(value.get("href"), str) or not value["href"].strip():
            errors.append(f"{where}: Field '{field}' must have a non-empty 'href'")
        for key in ["rel", "type"]:
            if not isinstance(value.get(key, ""), str):
                errors.append(f"{where}: Field '{field}.{key}' must be a string")
    elif value is not None and not isinstance(value, str):
        errors.append(f"{where}: Field '{field}' must be a URL or a mapping")


def _check_author(errors, where, section):
    value = section.get("author")
    if value is None:
        return
    if not isinstance(value, dict):
        errors.append(f"{where}: Field 'author' must be a dictionary")
        return
    for key in ["name", "email"]:
        if not isinstance(value.get(key, ""), str):
            errors.append(f"{where}: Field 'author.{key}' must be a string")


def _check_strings(errors, where, section, fields):
    for field in fields:
        if section.get(field) is not None and not isinstance(section[field], str):
            errors.append(f"{where}: Field '{field}' must be a string")


def validate_config(config):
    """
    Validate a feed definition.
    Returns a tuple (is_valid, errors) where errors is a list of error messages.
    """
    errors = []

    if not isinstance(config, dict):
        errors.append("Config must be a dictionary")
        return False, errors

    if "metadata" not in config:
        errors.append("Missing required 'metadata' section")
        return False, errors

    metadata = config["metadata"]
    items = config.get("items", [])

    if not isinstance(metadata, dict):
        errors.append("Metadata section must be a dictionary")
        return False, errors

    for field in ["title", "description"]:
        if field not in metadata:
            errors.append(f"Missing required metadata field: '{field}'")
        elif not isinstance(metadata[field], str):
            errors.append(f"Metadata field '{field}' must be a string")

    if "link" not in metadata:
        errors.append("Missing required metadata field: 'link'")
    else:
        _check_link(errors, "Metadata", metadata, "link")

    for field in ["created", "updated"]:
        _check_date(errors, "Metadata", metadata, field)

    _check_strings(errors, "Metadata", metadata, ["subtitle", "copyright"])
    _check_author(errors, "Metadata", metadata)
    if "itunes" in metadata and not isinstance(metadata["itunes"], (dict, type(None))):
        errors.append("Metadata field 'itunes' must be a dictionary")

    if not isinstance(items, list):
        errors.append("Items section must be a list")
        return False, errors

    for i, item in enumerate(items):
        where = f"Item {i + 1}"
        if not isinstance(item, dict):
            errors.append(f"{where} must be a dictionary")
            continue

        if "title" not in item:
            errors.append(f"{where}: Missing required field 'title'")
        elif not isinstance(item["title"], str):
            errors.append(f"{where}: Field 'title' must be a string")

        _check_strings(errors, where, item, ["description"])
        _check_author(errors, where, item)
        _check_link(errors, where, item, "link")
        _check_link(errors, where, item, "source")
        for field in ["created", "updated"]:
            _check_date(errors, where, item, field)

        itunes = item.get("itunes") or {}
        if not isinstance(itunes, dict):
            errors.append(f"{where}: Field 'itunes' must be a dictionary")
            continue
        size = itunes.get("audio_size", 0)
        if not isinstance(size, int) or isinstance(size, bool) or size < 0:
            errors.append(f"{where}: Field 'audio_size' must be a non-negative integer")

    return len(errors) == 0, errors


def item_from_config(entry, render_markdown=False):
    """Build a generic Item from one entry of the 'items' section."""
    description = entry.get("description") or ""
    if render_markdown and description:
        description = format_description(description)

    itunes = entry.get("itunes") or {}
    return Item(
        title=entry.get("title") or "",
        link=_link(entry.get("link")),
        description=description,
        id=str(entry.get("id") or ""),
        author=_author(entry.get("author")),
        source=_link(entry.get("source")),
        created=parse_date(entry.get("created")),
        updated=parse_date(entry.get("updated")),
        itunes=ItunesItem(
            audio_size=int(itunes.get("audio_size") or 0),
            **_strings(itunes, ITUNES_ITEM_FIELDS),
        ),
    )


def feed_from_config(config):
    """Build a generic Feed from a (validated) feed definition.

    Args:
        config (dict): Parsed YAML with 'metadata' and 'items' sections.

    Returns:
        Feed: The feed, items in file order.

    Raises:
        ValueError: If a date cannot be parsed.
    """
    metadata = config["metadata"]
    render_markdown = bool(config.get("markdown", False))

    description = metadata.get("description") or ""
    if render_markdown and description:
        description = format_description(description)

    feed = Feed(
        title=metadata.get("title") or "",
        link=_link(metadata.get("link")),
        description=description,
        author=_author(metadata.get("author")),
        copyright=metadata.get("copyright") or "",
        subtitle=metadata.get("subtitle") or "",
        id=str(metadata.get("id") or ""),
        created=parse_date(metadata.get("created")),
        updated=parse_date(metadata.get("updated")),
        itunes=ItunesFeed(**_strings(metadata.get("itunes"), ITUNES_FEED_FIELDS)),
    )
    for entry in config.get("items") or []:
        feed.add(item_from_config(entry, render_markdown))
    return feed
