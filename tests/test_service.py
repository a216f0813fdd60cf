"""Tests for the FeedIo facade."""

import copy
from datetime import datetime, timezone

import pytest
from lxml import etree

from feedio.config import ATOM_NAMESPACE
from feedio.fixers import FixerBase, LastModifiedFixer, PublicIdFixer
from feedio.models import Feed, Item
from feedio.service import FeedIo
from feedio.standards import Atom, NotFoundError, Rss

URL = "http://example/feed.xml"


class RecordingFixer(FixerBase):
    """Fixer recording the feeds it corrected."""

    def __init__(self) -> None:
        super().__init__()
        self.feeds: list[Feed] = []

    def correct(self, feed: Feed) -> None:
        self.feeds.append(feed)


class TestConfiguration:
    """Tests for standards and fixers configuration."""

    def test_default_standards(self, feed_io: FeedIo) -> None:
        assert isinstance(feed_io.get_standard("rss"), Rss)
        assert isinstance(feed_io.get_standard("ATOM"), Atom)
        assert feed_io.registry.names() == ["atom", "rss"]

    def test_default_fixers(self, feed_io: FeedIo) -> None:
        fixers = feed_io.fixer_pipeline.fixers
        assert [type(fixer) for fixer in fixers] == [LastModifiedFixer, PublicIdFixer]
        assert all(fixer.logger is feed_io.logger for fixer in fixers)

    def test_no_defaults(self, stub_client, logger) -> None:
        feed_io = FeedIo(stub_client, logger, load_defaults=False)
        assert feed_io.registry.names() == []
        assert feed_io.fixer_pipeline.fixers == ()

    @pytest.mark.parametrize("name", ["custom", "CUSTOM", "Custom"])
    def test_add_standard_any_casing(self, feed_io: FeedIo, name: str) -> None:
        standard = Rss()
        assert feed_io.add_standard(name, standard) is feed_io
        for variant in ("custom", "CUSTOM", "cUsToM"):
            assert feed_io.get_standard(variant) is standard

    @pytest.mark.parametrize("name", ["2rss", "rss 2", "my_format!"])
    def test_add_standard_unusual_names(self, feed_io: FeedIo, name: str) -> None:
        standard = Rss()
        feed_io.add_standard(name, standard)
        assert feed_io.get_standard(name) is standard

    def test_added_standard_is_parseable(self, feed_io: FeedIo) -> None:
        feed_io.add_standard("Podcast", Rss())
        assert "podcast" in feed_io.reader.parsers

    @pytest.mark.parametrize("name", ["json", "JSON", "Json"])
    def test_unknown_standard(self, feed_io: FeedIo, name: str) -> None:
        with pytest.raises(NotFoundError):
            feed_io.get_standard(name)
        with pytest.raises(NotFoundError):
            feed_io.format(Feed(), name)

    def test_add_fixer_injects_logger(self, feed_io: FeedIo) -> None:
        fixer = RecordingFixer()
        assert feed_io.add_fixer(fixer) is feed_io
        assert fixer.logger is feed_io.logger
        assert feed_io.fixer_pipeline.fixers[-1] is fixer


class TestRead:
    """Tests for FeedIo.read and read_since."""

    def test_read_creates_new_feed(self, feed_io: FeedIo) -> None:
        first = feed_io.read(URL)
        second = feed_io.read(URL)

        assert isinstance(first.feed, Feed)
        assert first.feed is not second.feed
        assert first.feed.title == "Example news"

    def test_read_into_given_feed(self, feed_io: FeedIo) -> None:
        feed = Feed()
        assert feed_io.read(URL, feed).feed is feed

    def test_read_runs_fixers(self, feed_io: FeedIo) -> None:
        result = feed_io.read(URL)

        assert result.feed.last_modified == datetime(2025, 1, 8, 12, 30, tzinfo=timezone.utc)
        assert result.feed.items[1].public_id == "https://example.com/second"

    def test_fixers_run_when_not_modified(self, make_client, logger) -> None:
        feed_io = FeedIo(make_client(b"", status_code=304), logger)
        fixer = RecordingFixer()
        feed_io.add_fixer(fixer)
        feed = Feed()
        feed.add(Item(last_modified=datetime(2025, 1, 2, tzinfo=timezone.utc)))

        result = feed_io.read(URL, feed, datetime(2025, 1, 1, tzinfo=timezone.utc))

        assert not result.modified
        assert fixer.feeds == [feed]
        assert feed.last_modified == datetime(2025, 1, 2, tzinfo=timezone.utc)

    def test_read_since_forwards_date_and_timeout(self, feed_io: FeedIo, stub_client) -> None:
        since = datetime(2025, 1, 1, tzinfo=timezone.utc)
        result = feed_io.read_since(URL, since, timeout=5)

        assert result.modified_since == since
        assert stub_client.calls[-1]["headers"] == {"If-Modified-Since": "Wed, 01 Jan 2025 00:00:00 GMT"}
        assert stub_client.calls[-1]["timeout"] == 5

    def test_read_atom(self, make_client, atom_document, logger) -> None:
        feed_io = FeedIo(make_client(atom_document), logger)
        feed = feed_io.read(URL).feed
        assert feed.title == "Example blog"
        assert feed.items[0].title == "Atom entry"

    def test_transport_errors_propagate(self, logger) -> None:
        class FailingClient:
            def fetch(self, url, headers=None, timeout=None):
                raise ConnectionError("unreachable")

        with pytest.raises(ConnectionError, match="unreachable"):
            FeedIo(FailingClient(), logger).read(URL)

    def test_end_to_end_last_modified(self, make_client, rss_document, logger) -> None:
        feed_io = FeedIo(make_client(rss_document), logger, load_defaults=False)
        feed_io.add_standard("rss", Rss()).add_fixer(LastModifiedFixer())

        result = feed_io.read(URL)

        dates = [item.last_modified for item in result.feed]
        assert result.feed.last_modified == max(dates)

    def test_last_modified_with_naive_caller_dates(self, feed_io: FeedIo) -> None:
        feed = Feed()
        feed.add(Item(last_modified=datetime(2030, 1, 1)))

        result = feed_io.read(URL, feed)

        assert result.feed.last_modified == datetime(2030, 1, 1, tzinfo=timezone.utc)

    def test_correct_is_idempotent_after_read(self, feed_io: FeedIo) -> None:
        feed = feed_io.read(URL).feed
        once = copy.deepcopy(feed)
        feed_io.fixer_pipeline.correct(feed)
        assert feed == once


class TestFormat:
    """Tests for FeedIo.format, to_rss and to_atom."""

    def test_to_rss(self, feed_io: FeedIo) -> None:
        feed = feed_io.read(URL).feed
        root = feed_io.to_rss(feed).getroot()

        assert root.tag == "rss"
        assert [title.text for title in root.findall("channel/item/title")] == [
            "First post",
            "Second post",
        ]

    def test_to_atom(self, feed_io: FeedIo) -> None:
        feed = feed_io.read(URL).feed
        root = feed_io.to_atom(feed).getroot()

        assert root.tag == f"{{{ATOM_NAMESPACE}}}feed"
        assert len(root.findall(f"{{{ATOM_NAMESPACE}}}entry")) == 2

    def test_format_case_insensitive(self, feed_io: FeedIo) -> None:
        document = feed_io.format(Feed(title="t"), "RSS")
        assert isinstance(document, etree._ElementTree)
        assert document.getroot().findtext("channel/title") == "t"

    def test_rss_to_atom_and_back(self, feed_io: FeedIo, make_client) -> None:
        feed = feed_io.read(URL).feed
        atom = etree.tostring(feed_io.to_atom(feed))

        reparsed = FeedIo(make_client(atom), feed_io.logger).read(URL).feed

        assert reparsed.title == feed.title
        assert [item.public_id for item in reparsed] == [item.public_id for item in feed]
        assert [e.value for e in reparsed.items[0].get_element_iterator("category")] == [
            "news",
            "tech",
        ]

    def test_atom_to_rss_keeps_feed_link(self, make_client, atom_document, logger) -> None:
        feed = FeedIo(make_client(atom_document), logger).read(URL).feed
        rss = etree.tostring(FeedIo(make_client(b""), logger).to_rss(feed))

        reparsed = FeedIo(make_client(rss), logger).read(URL).feed

        assert feed.link == "https://example.org/"
        assert reparsed.link == feed.link
        assert [e.get_attribute("rel") for e in reparsed.get_element_iterator("link")] == ["self"]
