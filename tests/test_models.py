"""Tests for data models."""

import dataclasses

import pytest

from eksi_miner.models import DEFAULT_LIMIT, DebeRecord, Entry, RetrievalConfig, Topic


class TestEntry:
    def test_defaults(self):
        entry = Entry()
        assert entry.id == ""
        assert entry.author == ""
        assert entry.date == ""
        assert entry.text == ""

    def test_to_dict(self):
        entry = Entry(id="1", author="ssg", date="15.02.1999", text="ilk")
        assert entry.to_dict() == {"id": "1", "author": "ssg", "date": "15.02.1999", "text": "ilk"}

    def test_immutable(self):
        entry = Entry(id="1")
        with pytest.raises(dataclasses.FrozenInstanceError):
            entry.id = "2"


class TestTopic:
    def test_to_dict(self):
        topic = Topic(title="başlık", link="https://eksisozluk.com/baslik--1", count=4)
        assert topic.to_dict() == {"title": "başlık", "link": "https://eksisozluk.com/baslik--1", "count": 4}


class TestDebeRecord:
    def test_to_dict_nested(self):
        record = DebeRecord(
            topic=Topic(title="t", link="https://eksisozluk.com/t", count=1),
            entry=Entry(id="9", author="a", date="d", text="x"),
        )
        d = record.to_dict()
        assert d["topic"]["count"] == 1
        assert d["entry"]["id"] == "9"


class TestRetrievalConfig:
    def test_defaults(self):
        config = RetrievalConfig()
        assert config.page_number == 1
        assert config.limit == DEFAULT_LIMIT
        assert config.sukela is False

    def test_zero_limit_allowed(self):
        assert RetrievalConfig(limit=0).limit == 0

    def test_rejects_negative_limit(self):
        with pytest.raises(ValueError):
            RetrievalConfig(limit=-1)

    def test_rejects_page_zero(self):
        with pytest.raises(ValueError):
            RetrievalConfig(page_number=0)
