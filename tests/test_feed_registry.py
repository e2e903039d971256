import pytest

from rss_notes.feed_registry import get_all_feeds
from rss_notes.models import FeedRegistration
from rss_notes.vault import FileSystemVault
from tests.test_utils import index_note_stub

@pytest.fixture
def vault(tmp_path):
    vault = FileSystemVault(str(tmp_path))
    vault.create_folder("RSS/Feed One")
    return vault

def test_get_all_feeds(vault):
    vault.create("RSS/Feed One.md", index_note_stub("https://example.com/one"))
    vault.create("RSS/Feed Two.md", index_note_stub("https://example.com/two"))

    assert get_all_feeds(vault, "RSS") == [
        FeedRegistration(url="https://example.com/one", index_note_path="RSS/Feed One.md"),
        FeedRegistration(url="https://example.com/two", index_note_path="RSS/Feed Two.md"),
    ]

def test_extra_front_matter_fields(vault):
    vault.create(
        "RSS/Feed One.md",
        "---\ndescription: A feed\nurl: https://example.com/one\nupdated: 2024-01-01T00:00:00.000Z\nlastChecked: \n---\n# Feed\n",
    )

    assert get_all_feeds(vault, "RSS") == [
        FeedRegistration(url="https://example.com/one", index_note_path="RSS/Feed One.md"),
    ]

@pytest.mark.parametrize(
    "text",
    [
        "# No front matter\n",
        "---\ntitle: No url\n---\n",
        "---\nurl:\n---\n",
        "---\nurl: [broken\n---\n",
        "---\nurl: 42\n---\n",
    ]
)
def test_notes_without_url_are_excluded(vault, text):
    vault.create("RSS/Not A Feed.md", text)
    vault.create("RSS/Feed One.md", index_note_stub("https://example.com/one"))

    assert [registration.url for registration in get_all_feeds(vault, "RSS")] == ["https://example.com/one"]

def test_only_direct_children_of_root_folder(vault):
    vault.create_folder("Other/RSS")
    vault.create("RSS/Feed One/Item.md", index_note_stub("https://example.com/item"))
    vault.create("Other/RSS/Nested.md", index_note_stub("https://example.com/nested"))
    vault.create("Top.md", index_note_stub("https://example.com/top"))
    vault.create("RSS/Feed One.md", index_note_stub("https://example.com/one"))

    assert [registration.url for registration in get_all_feeds(vault, "RSS")] == ["https://example.com/one"]

def test_empty_vault(tmp_path):
    assert get_all_feeds(FileSystemVault(str(tmp_path)), "RSS") == []
