from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Vault-relative path with "/" separators.
VaultPath = str

### Feed

class ImageRef(BaseModel):
    """
    Image referenced by a feed or an item.
    """
    url: str # The URL of the image.
    title: Optional[str] = None # The title of the image.

class AuthorRef(BaseModel):
    """
    Author of an item.
    """
    name: Optional[str] = None # The display name of the author.
    email: Optional[str] = None # The email of the author.

class CategoryRef(BaseModel):
    """
    Category of an item.
    """
    term: Optional[str] = None # The category identifier.
    label: Optional[str] = None # The human readable category name.

    @property
    def display_label(self) -> Optional[str]:
        return self.label or self.term

class ParsedItem(BaseModel):
    """
    Item of a parsed feed.
    """
    title: Optional[str] = None # The title of the item.
    id: Optional[str] = None # The unique identifier of the item within the feed.
    link: Optional[str] = None # The URL of the item.
    authors: List[AuthorRef] = Field(default_factory=list) # The authors of the item.
    categories: List[CategoryRef] = Field(default_factory=list) # The categories of the item.
    description: Optional[str] = None # The HTML summary of the item.
    content: Optional[str] = None # The HTML content of the item.
    published: Optional[datetime] = None # The date and time the item was published.
    updated: Optional[datetime] = None # The date and time the item was last updated.
    image: Optional[ImageRef] = None # The item's own image.
    media_images: List[ImageRef] = Field(default_factory=list) # Images attached as media.

class ParsedFeed(BaseModel):
    """
    RSS or Atom feed as returned by the parser.
    """
    title: Optional[str] = None # The title of the feed.
    description: Optional[str] = None # The description of the feed.
    self_url: Optional[str] = None # The URL the feed declares for itself.
    updated: Optional[datetime] = None # The date and time the feed was last updated.
    items: List[ParsedItem] = Field(default_factory=list) # The items of the feed.
    image: Optional[ImageRef] = None # The image of the feed.

### Sync

class FeedRegistration(BaseModel):
    """
    A feed discovered from an index note in the vault.
    """
    url: str # The URL of the feed.
    index_note_path: VaultPath # The path of the index note the URL was read from.

    model_config = ConfigDict(
        frozen = True,
    )

class FeedSyncResult(BaseModel):
    """
    Outcome of synchronizing one feed.
    """
    url: str # The URL of the feed.
    index_note_path: VaultPath # The path of the index note after the pass.
    created_notes: List[VaultPath] = Field(default_factory=list) # Item notes created in the pass.
    error: Optional[str] = None # The error that stopped the pass, if any.

    @property
    def succeeded(self) -> bool:
        return self.error is None

### App

class AppEnvSettings(BaseSettings):
    """
    App settings from environment variables.
    """
    vault_dir: Optional[str] = None # The directory of the vault.
    root_folder: str = "RSS" # The vault folder holding index notes and feed folders.
    refresh_minutes: int = 60 # The interval between scheduled passes.
    request_timeout: Optional[float] = None # The HTTP timeout in seconds.
    log_level: str = "INFO" # The logging level.

    model_config = SettingsConfigDict(
        env_prefix="RSS_NOTES_",
        env_file=".env",
        env_file_encoding="utf-8",
        frozen=True,
        extra="ignore",
    )

class AppConfig(BaseModel):
    """
    Global app config.
    """
    vault_dir: str # The directory of the vault.
    root_folder: str # The vault folder holding index notes and feed folders.
    refresh_minutes: int # The interval between scheduled passes.
    request_timeout: Optional[float] = None # The HTTP timeout in seconds.
    log_level: str = "INFO" # The logging level.

    model_config = ConfigDict(
        frozen = True,
    )
