"""
Builder Module - Webhook execution payloads

Builds the JSON body of a webhook execution request with:
- Ordered fields (insertion order, overwrite keeps slot)
- A single default field (tts = False)
- Opaque embed objects
"""

from .execute_webhook import ExecuteWebhook, FIELD_NAMES

__all__ = [
    "ExecuteWebhook",
    "FIELD_NAMES",
]
