"""
Pytest configuration for unit tests.

Provides sample feeds, a mock transport, and isolation of the
environment-backed AppConfig singleton.
"""

import pytest
from unittest.mock import Mock

from newznab_client import config


SEARCH_FEED = b"""<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0" xmlns:atom="http://www.w3.org/2005/Atom" xmlns:newznab="http://www.newznab.com/DTD/2010/feeds/attributes/">
<channel>
  <atom:link href="https://www.usenet-crawler.com/api" rel="self" type="application/rss+xml" />
  <title>usenet-crawler</title>
  <description>usenet-crawler API results</description>
  <link>https://www.usenet-crawler.com/</link>
  <language>en-gb</language>
  <image>
    <url>https://www.usenet-crawler.com/templates/default/images/banner.jpg</url>
    <title>usenet-crawler</title>
    <link>https://www.usenet-crawler.com/</link>
    <description>Visit usenet-crawler</description>
  </image>
  <newznab:response offset="0" total="2" />
  <item>
    <title>Game.of.Thrones.S05E01.720p.HDTV.x264-IMMERSE</title>
    <guid isPermaLink="true">https://www.usenet-crawler.com/details/abc123</guid>
    <link>https://www.usenet-crawler.com/getnzb/abc123.nzb&amp;i=1</link>
    <comments>https://www.usenet-crawler.com/details/abc123#comments</comments>
    <pubDate>Mon, 13 Apr 2015 02:13:49 -0400</pubDate>
    <category>TV &gt; HD</category>
    <description>Game of Thrones S05E01 720p</description>
    <enclosure url="https://www.usenet-crawler.com/getnzb/abc123.nzb" length="1326519898" type="application/x-nzb" />
    <newznab:attr name="category" value="5000" />
    <newznab:attr name="category" value="5040" />
    <newznab:attr name="size" value="1326519898" />
    <newznab:attr name="guid" value="abc123" />
    <newznab:attr name="tvairdate" value="Sun, 12 Apr 2015 21:00:00 -0400" />
    <newznab:attr name="grabs" value="1532" />
    <newznab:attr name="comments" value="3" />
  </item>
  <item>
    <title>Game.of.Thrones.S05E01.480p.HDTV.x264-mSD</title>
    <guid isPermaLink="false">def456</guid>
    <pubDate>Mon, 13 Apr 2015 03:00:00 +0000</pubDate>
    <description>Game of Thrones S05E01 480p</description>
    <newznab:attr name="guid" value="def456" />
    <newznab:attr name="size" value="abc" />
    <newznab:attr name="tvairdate" value="not a date" />
    <newznab:attr name="grabs" value="12" />
    <newznab:attr name="rageid" value="24493" />
  </item>
</channel>
</rss>
"""

COMMENT_FEED = b"""<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0">
<channel>
  <title>usenet-crawler comments</title>
  <item>
    <title>Comment 1</title>
    <description>Great quality</description>
    <pubDate>Tue, 14 Apr 2015 10:00:00 +0000</pubDate>
  </item>
  <item>
    <title>Comment 2</title>
    <description>Missing blocks</description>
    <pubDate>yesterday</pubDate>
  </item>
  <item>
    <title>Comment 3</title>
    <description>Repaired fine</description>
    <pubDate>Wed, 15 Apr 2015 08:30:00 +0200</pubDate>
  </item>
</channel>
</rss>
"""

ERROR_FEED = b"""<?xml version="1.0" encoding="UTF-8"?>
<error code="100" description="Incorrect user credentials"/>
"""


@pytest.fixture
def search_feed():
    return SEARCH_FEED


@pytest.fixture
def comment_feed():
    return COMMENT_FEED


@pytest.fixture
def error_feed():
    return ERROR_FEED


@pytest.fixture
def transport():
    """Mock transport; set ``fetch.return_value`` per test."""
    mock = Mock()
    mock.fetch = Mock(return_value=b"")
    return mock


@pytest.fixture(autouse=True)
def isolated_app_config(monkeypatch):
    """
    Keep tests independent of the developer's environment.

    Clears NEWZNAB_* variables and resets the AppConfig singleton.
    """
    for var in ('NEWZNAB_API_KEY', 'NEWZNAB_BASE_URL', 'NEWZNAB_TIMEOUT', 'NEWZNAB_USER_AGENT'):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setattr(config, '_app_config', None)
    yield
