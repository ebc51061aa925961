"""
Domain service for word/meaning deduplication logic.

This is a pure domain service with no infrastructure dependencies.
"""

from wordvault.domain.vocabulary.entities.record import Record
from wordvault.utils import normalize_text


class RecordDeduplicationService:
    """
    Domain service for identifying duplicate vocabulary entries.

    Two entries are duplicates when their word and meaning match after
    trimming, lowercasing and collapsing whitespace.
    """

    @staticmethod
    def dedup_key(word: str, meaning: str) -> str:
        """Build the comparison key for a word/meaning pair."""
        return f"{normalize_text(word)}|{normalize_text(meaning)}"

    def existing_keys(self, records: list[Record] | tuple[Record, ...]) -> set[str]:
        """
        Collect dedup keys of records that are already stored.

        Args:
            records: Stored records

        Returns:
            Set of dedup keys
        """
        return {self.dedup_key(record.word, record.meaning) for record in records}

    def claim(self, word: str, meaning: str, seen: set[str]) -> bool:
        """
        Register a word/meaning pair unless it is already known.

        Args:
            word: Word text
            meaning: Meaning text
            seen: Keys of stored records plus pairs accepted earlier in
                the same batch (updated in place)

        Returns:
            True if the pair is new and was added to ``seen``
        """
        key = self.dedup_key(word, meaning)
        if key in seen:
            return False
        seen.add(key)
        return True
