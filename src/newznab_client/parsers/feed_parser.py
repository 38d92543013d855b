"""
lxml-based codec for newznab feeds.

Decoding is all-or-nothing at the envelope level: malformed XML or a
structurally invalid value (a non-integer ``<size>``, an unparsable
``<pubDate>``) fails the whole call. Per-attribute leniency is the
normalizer's job, not this module's.

Elements are matched by local name, so ``newznab:attr`` and ``torznab:attr``
are both accepted, except for the channel's ``atom:link`` and
``newznab:response`` which are matched by namespace.
"""

from datetime import datetime, timezone
from typing import Iterator, Optional, Union

from lxml import etree

from newznab_client.exceptions import DecodeError
from newznab_client.models.feed import (
    AtomLink,
    Attribute,
    Channel,
    ChannelImage,
    CommentChannel,
    CommentResponse,
    Enclosure,
    ItemCategory,
    ItemGUID,
    ItemSource,
    RawComment,
    RawNZB,
    ResponseInfo,
    SearchResponse,
)
from newznab_client.timecodec import format_rfc1123z, parse_rfc1123z

ATOM_NS = "http://www.w3.org/2005/Atom"
NEWZNAB_NS = "http://www.newznab.com/DTD/2010/feeds/attributes/"

_TRUE = {"1", "t", "T", "true", "TRUE", "True"}
_FALSE = {"", "0", "f", "F", "false", "FALSE", "False"}


# ============================================================================
# DECODING
# ============================================================================

def _parse_root(data: Union[bytes, str]) -> etree._Element:
    if isinstance(data, str):
        data = data.encode('utf-8')
    parser = etree.XMLParser(resolve_entities=False, no_network=True)
    try:
        root = etree.fromstring(data, parser)
    except (etree.XMLSyntaxError, ValueError) as e:
        raise DecodeError(f"Malformed XML: {e}") from e
    if root is None:
        raise DecodeError("Malformed XML: empty document")
    return root


def _children(elem: etree._Element, name: str, ns: Optional[str] = None) -> Iterator[etree._Element]:
    for child in elem:
        # Skip comments and processing instructions
        if not isinstance(child.tag, str):
            continue
        qname = etree.QName(child)
        if qname.localname != name:
            continue
        if ns is not None and qname.namespace != ns:
            continue
        yield child


def _child(elem: etree._Element, name: str, ns: Optional[str] = None) -> Optional[etree._Element]:
    # Repeated elements: the last one wins
    last = None
    for child in _children(elem, name, ns):
        last = child
    return last


def _text(elem: Optional[etree._Element]) -> str:
    if elem is None:
        return ""
    # Character data of the element itself; nested elements are skipped
    parts = [elem.text or ""]
    parts.extend(child.tail or "" for child in elem)
    return "".join(parts)


def _int(value: str, where: str) -> int:
    value = value.strip()
    if not value:
        return 0
    try:
        return int(value)
    except ValueError as e:
        raise DecodeError(f"Invalid integer for {where}: {value!r}") from e


def _bool(value: str, where: str) -> bool:
    value = value.strip()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise DecodeError(f"Invalid boolean for {where}: {value!r}")


def _decode_item(elem: etree._Element) -> RawNZB:
    category = _child(elem, 'category')
    guid = _child(elem, 'guid')
    source = _child(elem, 'source')
    enclosure = _child(elem, 'enclosure')
    pub_date = _child(elem, 'pubDate')

    return RawNZB(
        title=_text(_child(elem, 'title')),
        link=_text(_child(elem, 'link')),
        size=_int(_text(_child(elem, 'size')), 'item size'),
        category=ItemCategory(
            domain=category.get('domain', '') if category is not None else '',
            value=_text(category),
        ),
        guid=ItemGUID(
            value=_text(guid),
            is_perma_link=_bool(guid.get('isPermaLink', ''), 'guid isPermaLink') if guid is not None else False,
        ),
        comments=_text(_child(elem, 'comments')),
        description=_text(_child(elem, 'description')),
        author=_text(_child(elem, 'author')),
        source=ItemSource(
            url=source.get('url', '') if source is not None else '',
            value=_text(source),
        ),
        # Mandatory schema: FormatError propagates and aborts the decode
        pub_date=parse_rfc1123z(_text(pub_date)) if pub_date is not None else None,
        enclosure=Enclosure(
            url=enclosure.get('url', ''),
            length=enclosure.get('length', ''),
            type=enclosure.get('type', ''),
        ) if enclosure is not None else Enclosure(),
        attributes=[
            Attribute(name=attr.get('name', ''), value=attr.get('value', ''))
            for attr in _children(elem, 'attr')
        ],
    )


def _decode_channel(elem: Optional[etree._Element]) -> Channel:
    if elem is None:
        return Channel()

    link = _child(elem, 'link', ATOM_NS)
    image = _child(elem, 'image')
    response = _child(elem, 'response', NEWZNAB_NS)

    return Channel(
        title=_text(_child(elem, 'title')),
        link=AtomLink(
            href=link.get('href', ''),
            rel=link.get('rel', ''),
            type=link.get('type', ''),
        ) if link is not None else AtomLink(),
        description=_text(_child(elem, 'description')),
        language=_text(_child(elem, 'language')),
        webmaster=_text(_child(elem, 'webmaster')),
        category=_text(_child(elem, 'category')),
        image=ChannelImage(
            url=_text(_child(image, 'url')),
            title=_text(_child(image, 'title')),
            link=_text(_child(image, 'link')),
            description=_text(_child(image, 'description')),
            width=_int(_text(_child(image, 'width')), 'image width'),
            height=_int(_text(_child(image, 'height')), 'image height'),
        ) if image is not None else ChannelImage(),
        response=ResponseInfo(
            offset=_int(response.get('offset', ''), 'response offset'),
            total=_int(response.get('total', ''), 'response total'),
        ) if response is not None else ResponseInfo(),
        items=[_decode_item(item) for item in _children(elem, 'item')],
    )


def decode_search_response(data: Union[bytes, str]) -> SearchResponse:
    """
    Decode a newznab search feed.

    The root element name is not checked: an ``<rss>`` feed and an
    ``<error code=".." description=".."/>`` document both decode, the latter
    into ``error_code``/``error_description`` with an empty channel.

    Args:
        data: Raw XML bytes as returned by the transport

    Returns:
        SearchResponse with one RawNZB per ``<item>``, in document order

    Raises:
        DecodeError: If the XML is malformed or a structural value is invalid
        FormatError: If an item's ``<pubDate>`` is not RFC1123Z

    Example:
        >>> feed = decode_search_response(b'<rss version="2.0"><channel/></rss>')
        >>> feed.version, len(feed.channel.items)
        ('2.0', 0)
    """
    root = _parse_root(data)
    return SearchResponse(
        version=root.get('version', ''),
        error_code=_int(root.get('code', ''), 'error code'),
        error_description=root.get('description', ''),
        channel=_decode_channel(_child(root, 'channel')),
    )


def decode_comment_response(data: Union[bytes, str]) -> CommentResponse:
    """
    Decode a comments feed.

    Comment dates are kept as text; the caller parses them leniently.

    Raises:
        DecodeError: If the XML is malformed
    """
    root = _parse_root(data)
    channel = _child(root, 'channel')
    if channel is None:
        return CommentResponse()

    return CommentResponse(
        channel=CommentChannel(
            items=[
                RawComment(
                    title=_text(_child(item, 'title')),
                    description=_text(_child(item, 'description')),
                    pub_date=_text(_child(item, 'pubDate')),
                )
                for item in _children(channel, 'item')
            ]
        )
    )


# ============================================================================
# ENCODING
# ============================================================================

def _sub(parent: etree._Element, tag: str, text: str = "", **attrib: str) -> etree._Element:
    elem = etree.SubElement(parent, tag, attrib)
    if text:
        elem.text = text
    return elem


def _utc(dt: datetime) -> datetime:
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def _encode_item(channel: etree._Element, item: RawNZB) -> None:
    elem = _sub(channel, 'item')
    _sub(elem, 'title', item.title)
    _sub(elem, 'link', item.link)
    _sub(elem, 'size', str(item.size))
    _sub(elem, 'category', item.category.value, domain=item.category.domain)
    _sub(elem, 'guid', item.guid.value, isPermaLink='true' if item.guid.is_perma_link else 'false')
    _sub(elem, 'comments', item.comments)
    _sub(elem, 'description', item.description)
    if item.author:
        _sub(elem, 'author', item.author)
    if item.source.url or item.source.value:
        _sub(elem, 'source', item.source.value, url=item.source.url)
    if item.pub_date is not None:
        _sub(elem, 'pubDate', format_rfc1123z(_utc(item.pub_date)))
    if item.enclosure.url:
        _sub(
            elem, 'enclosure',
            url=item.enclosure.url,
            length=item.enclosure.length,
            type=item.enclosure.type,
        )
    for attr in item.attributes:
        _sub(elem, f'{{{NEWZNAB_NS}}}attr', name=attr.name, value=attr.value)


def encode_search_response(response: SearchResponse) -> bytes:
    """
    Encode a SearchResponse as a newznab RSS document.

    Item publish dates are written as RFC1123Z in UTC.

    Returns:
        UTF-8 XML bytes with declaration, suitable for ``decode_search_response``
    """
    root = etree.Element('rss', nsmap={'atom': ATOM_NS, 'newznab': NEWZNAB_NS})
    root.set('version', response.version or '2.0')
    if response.error_code:
        root.set('code', str(response.error_code))
        root.set('description', response.error_description)

    ch = response.channel
    channel = _sub(root, 'channel')
    _sub(channel, 'title', ch.title)
    if ch.link.href:
        _sub(channel, f'{{{ATOM_NS}}}link', href=ch.link.href, rel=ch.link.rel, type=ch.link.type)
    _sub(channel, 'description', ch.description)
    if ch.language:
        _sub(channel, 'language', ch.language)
    if ch.webmaster:
        _sub(channel, 'webmaster', ch.webmaster)
    if ch.category:
        _sub(channel, 'category', ch.category)
    if ch.image.url:
        image = _sub(channel, 'image')
        _sub(image, 'url', ch.image.url)
        _sub(image, 'title', ch.image.title)
        _sub(image, 'link', ch.image.link)
        if ch.image.description:
            _sub(image, 'description', ch.image.description)
        if ch.image.width:
            _sub(image, 'width', str(ch.image.width))
        if ch.image.height:
            _sub(image, 'height', str(ch.image.height))
    _sub(
        channel, f'{{{NEWZNAB_NS}}}response',
        offset=str(ch.response.offset),
        total=str(ch.response.total),
    )

    for item in ch.items:
        _encode_item(channel, item)

    return etree.tostring(root, xml_declaration=True, encoding='UTF-8', pretty_print=True)
