"""Test fixtures for the vocab app: an in-memory server and fake Qt views."""

import asyncio
import json

import pytest

from repositories.remote_store import Response
from services.data_sets import DictionaryDataSet, Entry, RecentItemsDataSet


class FakeStore:
    """Stands in for RemoteStore; keeps documents in a dict keyed by path."""

    def __init__(self, documents=None):
        self.documents = dict(documents or {})
        self.get_status = {}
        self.put_status = {}
        self.put_delays = []
        self.fail_transport = False
        self.requests = []

    async def get(self, path):
        self.requests.append(("GET", path, None))
        await asyncio.sleep(0)
        if self.fail_transport:
            raise ConnectionRefusedError("connection refused")
        if path in self.get_status:
            return Response(self.get_status[path])
        if path not in self.documents:
            return Response(404)
        body = self.documents[path]
        if not isinstance(body, bytes):
            body = json.dumps(body).encode("utf-8")
        return Response(200, body)

    async def put(self, path, payload):
        self.requests.append(("PUT", path, payload))
        delay = self.put_delays.pop(0) if self.put_delays else 0
        await asyncio.sleep(delay)
        if self.fail_transport:
            raise ConnectionRefusedError("connection refused")
        status = self.put_status.get(path, 200)
        if 200 <= status < 300:
            self.documents[path] = payload
        return Response(status)

    def puts(self, path=None):
        return [r for r in self.requests if r[0] == "PUT" and (path is None or r[1] == path)]


class FakeSignal:
    def __init__(self):
        self._slots = []

    def connect(self, slot):
        self._slots.append(slot)

    def emit(self, *args):
        for slot in list(self._slots):
            slot(*args)


class FakeMessages:
    def __init__(self):
        self.history = []

    def set_message(self, msg):
        self.history.append(msg)

    @property
    def last(self):
        return self.history[-1] if self.history else None


class FakeDictionaryView:
    def __init__(self):
        self.word_edited = FakeSignal()
        self.translation_edited = FakeSignal()
        self.add_requested = FakeSignal()
        self.delete_requested = FakeSignal()
        self.word = ""
        self.translation = ""
        self.translation_enabled = True
        self.add_visible = False
        self.before = []
        self.after = []
        self.focused = 0
        self.confirm = True
        self.confirmed = []

    def word_text(self):
        return self.word

    def translation_text(self):
        return self.translation

    def set_translation(self, text, enabled):
        self.translation = text
        self.translation_enabled = enabled

    def set_add_visible(self, visible):
        self.add_visible = visible

    def show_rows(self, before, after):
        self.before = list(before)
        self.after = list(after)

    def focus_word(self):
        self.focused += 1

    def confirm_delete(self, word):
        self.confirmed.append(word)
        return self.confirm

    # user typing helpers
    def type_word(self, word):
        self.word = word
        self.word_edited.emit(word)

    def type_translation(self, text):
        self.translation = text
        self.translation_edited.emit(text)


class FakeRecentView:
    def __init__(self):
        self.entries = None

    def show_entries(self, entries):
        self.entries = list(entries)


class FakeWindow:
    def __init__(self):
        self.message_bar = FakeMessages()
        self.dictionary_panel = FakeDictionaryView()
        self.recent_panel = FakeRecentView()
        self.import_requested = FakeSignal()
        self.export_requested = FakeSignal()
        self.import_path = ""
        self.export_path = ""

    def ask_import_path(self):
        return self.import_path

    def ask_export_path(self):
        return self.export_path


def run(coro):
    return asyncio.run(coro)


async def settle():
    """Let pending callbacks and tasks run."""
    for _ in range(10):
        await asyncio.sleep(0)


@pytest.fixture
def store():
    return FakeStore()


@pytest.fixture
def entries():
    return [
        Entry("ant", "hormiga"),
        Entry("bee", "abeja"),
        Entry("cat", "gato"),
        Entry("dog", "perro"),
    ]


@pytest.fixture
def dictionary(store):
    return DictionaryDataSet(store)


@pytest.fixture
def recent(store):
    return RecentItemsDataSet(store)
