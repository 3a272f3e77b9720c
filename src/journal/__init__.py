from .models import JournalEntry
from .service import JournalService
from .storage import EntryStore, MoodJournalStorage

__all__ = ["JournalEntry", "JournalService", "EntryStore", "MoodJournalStorage"]
