from abc import ABC, abstractmethod

from errors import NoVictimAvailableError


class ReplacementPolicy(ABC):
    """
    Chooses which resident page gives up its frame when a fault finds the
    frame pool empty. Subclasses only decide how a resident entry scores;
    the lowest score is evicted and the first entry scanned wins ties.
    """

    name = None

    @abstractmethod
    def score(self, entry):
        pass

    def select_victim(self, page_table, page_number=None):
        """
        Returns the resident PageTableEntry to evict.
        Raises NoVictimAvailableError when nothing is resident.
        """
        victim = None
        victim_score = None

        for entry in page_table.resident_entries():
            entry_score = self.score(entry)
            if victim is None or entry_score < victim_score:
                victim = entry
                victim_score = entry_score

        if victim is None:
            raise NoVictimAvailableError(page_number, policy=self.name)
        return victim

    def __repr__(self):
        return f"{type(self).__name__}()"


class FIFOPolicy(ReplacementPolicy):
    name = 'FIFO'

    def score(self, entry):
        return entry.arrival_time


class LRUPolicy(ReplacementPolicy):
    name = 'LRU'

    def score(self, entry):
        return entry.last_access_time


class LFUPolicy(ReplacementPolicy):
    name = 'LFU'

    def score(self, entry):
        return entry.reference_count

    def select_victim(self, page_table, page_number=None):
        # Lowest reference count first, then the earliest arrival among the
        # pages sharing that count
        resident = page_table.resident_entries()
        if not resident:
            raise NoVictimAvailableError(page_number, policy=self.name)

        lowest_count = min(entry.reference_count for entry in resident)
        candidates = [entry for entry in resident if entry.reference_count == lowest_count]

        victim = candidates[0]
        for entry in candidates[1:]:
            if entry.arrival_time < victim.arrival_time:
                victim = entry
        return victim


POLICIES = {
    'FIFO': FIFOPolicy,
    'LRU': LRUPolicy,
    'LFU': LFUPolicy,
}


def get_policy(algorithm):
    if isinstance(algorithm, ReplacementPolicy):
        return algorithm
    try:
        return POLICIES[algorithm.upper()]()
    except (KeyError, AttributeError):
        raise ValueError(f"Unknown algorithm: {algorithm}") from None
