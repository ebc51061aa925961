"""In-memory working copy of the stored records."""

from wordvault.domain.common.value_objects import RecordId
from wordvault.domain.vocabulary.entities.record import Record


class RecordSet:
    """
    Read-mostly cache of every stored record, tagged with a version.

    Only two writes exist: a full replace after a store mutation has been
    reloaded, and a single-record patch after a review outcome was persisted.
    Both bump ``version`` so derived views know to recompute. Callers must
    only write after the store confirmed the mutation.
    """

    def __init__(self) -> None:
        self._records: tuple[Record, ...] = ()
        self._index: dict[RecordId, int] = {}
        self._version = 0

    @property
    def version(self) -> int:
        return self._version

    @property
    def records(self) -> tuple[Record, ...]:
        return self._records

    def __len__(self) -> int:
        return len(self._records)

    def get(self, record_id: RecordId) -> Record | None:
        position = self._index.get(record_id)
        return self._records[position] if position is not None else None

    def replace_all(self, records: list[Record]) -> None:
        """Replace the whole working copy with freshly loaded records."""
        self._records = tuple(records)
        self._index = {record.id: i for i, record in enumerate(self._records)}
        self._version += 1

    def patch(self, record: Record) -> bool:
        """
        Swap in an updated copy of one record, matched by id.

        Returns:
            True if the record was present and replaced
        """
        position = self._index.get(record.id)
        if position is None:
            return False
        records = list(self._records)
        records[position] = record
        self._records = tuple(records)
        self._version += 1
        return True
