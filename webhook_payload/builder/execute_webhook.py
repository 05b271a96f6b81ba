"""
Execute Webhook Builder - Assembles the body of a webhook execution request

Accumulates the optional fields of one webhook message:
- content: Message text
- username: Display name override
- avatar_url: Avatar image override
- tts: Text-to-speech flag (always present, defaults to False)
- embeds: Rich-content embed objects

Field order is insertion order. Re-setting a field replaces its value
in its original slot.
"""

import logging
from collections.abc import Mapping
from typing import Any, Dict, Iterator, Sequence

logger = logging.getLogger(__name__)


FIELD_NAMES = ("content", "username", "avatar_url", "tts", "embeds")


class ExecuteWebhook(Mapping):
    """
    Builds the payload of a single webhook execution

    Usage:
    ```python
    w = ExecuteWebhook.default()
    w.content("Here's some information on Python:")
    w.embeds([website, resources])

    client.execute(webhook_id, token, w)
    # Sends: {"tts": false, "content": "...", "embeds": [...]}
    ```

    The builder is itself the finished payload: it is a read-only mapping
    and can be handed to the transport at any point after construction.
    """

    def __init__(self):
        """Initialize with the only default field, tts = False"""
        self._fields: Dict[str, Any] = {}
        self._set("tts", False)

    @classmethod
    def default(cls) -> "ExecuteWebhook":
        """Return a builder holding only {"tts": False}"""
        return cls()

    def avatar_url(self, avatar_url: str) -> None:
        """Override the default avatar of the webhook with an image URL"""
        self._set("avatar_url", avatar_url)

    def content(self, content: str) -> None:
        """
        Set the content of the message

        May be omitted when at least one embed is set via embeds().
        """
        self._set("content", content)

    def embeds(self, embeds: Sequence[Any]) -> None:
        """
        Set the embeds associated with the message

        Replaces any previously set embeds with the full sequence given.
        Embeds are opaque to the builder: plain dicts, or objects exposing
        to_dict(), which is called when the payload is serialized.
        """
        self._set("embeds", list(embeds))

    def tts(self, tts: bool) -> None:
        """Whether the message is a text-to-speech message"""
        self._set("tts", tts)

    def username(self, username: str) -> None:
        """Override the default username of the webhook"""
        self._set("username", username)

    def _set(self, name: str, value: Any) -> None:
        # dict assignment keeps an existing key's slot
        self._fields[name] = value
        logger.debug(f"Set webhook field {name}")

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to an insertion-ordered dictionary ready for a JSON body

        Returns:
            Plain dict copy of the fields, embeds expanded via to_dict()
            where they provide it
        """
        payload = {}

        for name, value in self._fields.items():
            if name == "embeds":
                value = [
                    embed.to_dict() if hasattr(embed, "to_dict") else embed
                    for embed in value
                ]
            payload[name] = value

        return payload

    def __getitem__(self, name: str) -> Any:
        return self._fields[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def __repr__(self) -> str:
        return f"ExecuteWebhook({self._fields!r})"
