"""Save a record, re-slugging when the store reports a slug conflict.

The resolver checks for collisions and the store writes afterwards, so two
records resolved at the same time can pick the same slug. Stores with a
unique constraint reject the second write; this helper recomputes the slug
against the now-visible sibling and tries again.
"""

from tenacity import Retrying, retry_if_exception_type, stop_after_attempt

from sluggable.constants import DEFAULT_SAVE_ATTEMPTS
from sluggable.exceptions import SlugConflictError
from sluggable.models.record import SluggableModel
from sluggable.service import SlugService
from sluggable.store import InMemorySlugStore
from sluggable.utils.logging import get_logger

logger = get_logger(__name__)


def save_with_slug(
    service: SlugService,
    record: SluggableModel,
    store: InMemorySlugStore,
    attempts: int = DEFAULT_SAVE_ATTEMPTS,
) -> bool:
    """
    Slug and save a record, retrying on storage-level slug conflicts.

    Retries re-slug with ``force=True``, so every slug field is rebuilt
    from its source. A slug the caller set by hand that conflicts in the
    store is replaced by a generated one rather than suffixed.

    Args:
        service: Slug service
        record: Record to save
        store: Store to save into
        attempts: Maximum number of save attempts

    Returns:
        True if the slug changed on the first pass

    Raises:
        SlugConflictError: If every attempt conflicts
    """
    changed = service.slug(record)

    for attempt in Retrying(
        stop=stop_after_attempt(attempts),
        retry=retry_if_exception_type(SlugConflictError),
        reraise=True,
    ):
        with attempt:
            number = attempt.retry_state.attempt_number
            if number > 1:
                logger.warning(
                    "Slug conflict, re-slugging",
                    record_type=record.slug_type_key(),
                    attempt=number,
                )
                service.slug(record, force=True)
            store.save(record)

    return changed
