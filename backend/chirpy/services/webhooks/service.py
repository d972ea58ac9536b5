"""Payment-provider (Polka) webhook handling."""

from __future__ import annotations

import logging
import uuid
from collections.abc import Mapping
from typing import Any, Final

from chirpy.services._shared.base import BaseService
from chirpy.services._shared.errors import BadRequestError
from chirpy.services.identity.service import IdentityService

log = logging.getLogger(__name__)

USER_UPGRADED_EVENT: Final[str] = "user.upgraded"


class WebhookService(BaseService):
    """
    Apply Polka events to user accounts.

    Only ``user.upgraded`` has an effect; other events are acknowledged and
    ignored. Callers authenticate the request before reaching this service.
    """

    def __init__(self, *, identity: IdentityService | None = None) -> None:
        super().__init__()
        self.identity = identity or IdentityService()

    def handle_polka_event(self, event: Any, data: Any) -> bool:
        """
        Process one webhook delivery.

        :param event: Event name as delivered (any JSON value).
        :param data: Event payload; ``user.upgraded`` carries a ``userId``
            mapping entry. Ignored events may carry anything.
        :returns: ``True`` when the event changed state.
        :raises BadRequestError: If ``data`` is not an object or ``userId``
            is missing or not a UUID.
        :raises NotFoundError: If the user does not exist.
        """
        if event != USER_UPGRADED_EVENT:
            log.info("ignoring polka event", extra={"status": str(event)})
            return False

        raw_user_id = data.get("userId") if isinstance(data, Mapping) else None
        try:
            user_id = uuid.UUID(raw_user_id) if isinstance(raw_user_id, str) else None
        except ValueError:
            user_id = None
        if user_id is None:
            raise BadRequestError("Invalid userId")

        self.identity.upgrade_to_chirpy_red(user_id)
        log.info("user upgraded to chirpy red", extra={"user_id": str(user_id)})
        return True
