class PageReplacementError(Exception):
    """Base class for failures raised by the replacement engine.

    ``policy`` is filled in by the simulation drivers so the caller can
    tell which policy's run failed.
    """

    def __init__(self, message, policy=None):
        super().__init__(message)
        self.message = message
        self.policy = policy

    def __str__(self):
        if self.policy:
            return f"[{self.policy}] {self.message}"
        return self.message


class PageIndexError(PageReplacementError, IndexError):
    def __init__(self, page_number, num_pages, policy=None):
        super().__init__(
            f"Page {page_number} is outside the page table (0..{num_pages - 1})",
            policy=policy)
        self.page_number = page_number
        self.num_pages = num_pages


class NoVictimAvailableError(PageReplacementError):
    """A fault hit an empty frame pool with nothing resident to evict.

    This means the caller's frame accounting is broken, e.g. the process
    was handed zero frames.
    """

    def __init__(self, page_number, policy=None):
        super().__init__(
            f"No free frame and no resident page to evict for page {page_number}",
            policy=policy)
        self.page_number = page_number


class CapacityExceededError(PageReplacementError, ValueError):
    def __init__(self, what, size, limit, policy=None):
        super().__init__(f"{what} has {size} items, limit is {limit}", policy=policy)
        self.what = what
        self.size = size
        self.limit = limit
