"""Webhook execution client."""
import logging
from typing import Any, Callable, Dict, Optional, Union

import requests

from config import WebhookApiConfig
from webhook_payload.builder import ExecuteWebhook

logger = logging.getLogger(__name__)

BuilderArg = Union[ExecuteWebhook, Callable[[ExecuteWebhook], ExecuteWebhook]]


class WebhookClient:
    """Client that delivers ExecuteWebhook payloads to a webhook endpoint."""

    def __init__(self, config: WebhookApiConfig):
        """Initialize client."""
        self.config = config
        self.session = requests.Session()

    def execute(
        self,
        webhook_id: str,
        token: str,
        builder: BuilderArg,
        wait: bool = False,
    ) -> Optional[Dict[str, Any]]:
        """
        Execute a webhook with the given payload

        Args:
            webhook_id: Webhook ID
            token: Webhook secret token
            builder: Finished builder, or a function that fills in a
                default builder (returning it, or None)
            wait: Ask the API to return the created message

        Returns:
            Created message when wait is set, {} otherwise, None on failure

        Raises:
            ValueError: If webhook_id or token is blank
        """
        if not str(webhook_id).strip() or not str(token).strip():
            raise ValueError("Webhook id and token are required")

        if callable(builder) and not isinstance(builder, ExecuteWebhook):
            default = ExecuteWebhook.default()
            filled = builder(default)
            builder = default if filled is None else filled

        url = f"{self.config.base_url}/webhooks/{webhook_id}/{token}"
        params = {"wait": "true"} if wait else None

        try:
            response = self.session.post(
                url,
                json=builder.to_dict(),
                params=params,
                timeout=self.config.timeout,
            )
            response.raise_for_status()
        except requests.exceptions.RequestException as e:
            # Exception text carries the URL, which includes the token
            status = e.response.status_code if e.response is not None else None
            detail = f"HTTP {status}" if status is not None else type(e).__name__
            logger.error(f"Error executing webhook {webhook_id}: {detail}")
            return None

        logger.info(f"Executed webhook {webhook_id}")

        if not wait:
            return {}

        try:
            return response.json()
        except ValueError as e:
            logger.warning(f"Invalid JSON from webhook {webhook_id}: {e}")
            return {}
