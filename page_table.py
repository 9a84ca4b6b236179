from errors import PageIndexError


class ResidentPage:
    def __init__(self, frame, now):
        self.frame = frame
        self.arrival_time = now
        self.last_access_time = now
        self.reference_count = 1

    def copy(self):
        page = ResidentPage(self.frame, self.arrival_time)
        page.last_access_time = self.last_access_time
        page.reference_count = self.reference_count
        return page


class PageTableEntry:
    def __init__(self, virtual_page_num):
        self.virtual_page_num = virtual_page_num
        self.resident = None  # None means not in memory

    def is_valid(self):
        return self.resident is not None

    # Bookkeeping fields read as None while the page is absent
    @property
    def frame(self):
        return self.resident.frame if self.resident else None

    @property
    def arrival_time(self):
        return self.resident.arrival_time if self.resident else None

    @property
    def last_access_time(self):
        return self.resident.last_access_time if self.resident else None

    @property
    def reference_count(self):
        return self.resident.reference_count if self.resident else None

    def load(self, frame, now):
        if self.resident is not None:
            raise ValueError(f"Page {self.virtual_page_num} is already resident")
        self.resident = ResidentPage(frame, now)

    def touch(self, now):
        self.resident.last_access_time = now
        self.resident.reference_count += 1
        return self.resident.frame

    def evict(self):
        frame = self.resident.frame
        self.resident = None
        return frame

    def copy(self):
        entry = PageTableEntry(self.virtual_page_num)
        if self.resident is not None:
            entry.resident = self.resident.copy()
        return entry

    def __eq__(self, other):
        if not isinstance(other, PageTableEntry):
            return NotImplemented
        return (self.virtual_page_num == other.virtual_page_num
                and self.frame == other.frame
                and self.arrival_time == other.arrival_time
                and self.last_access_time == other.last_access_time
                and self.reference_count == other.reference_count)

    def __repr__(self):
        if self.resident is None:
            return f"PageTableEntry({self.virtual_page_num}, absent)"
        return (f"PageTableEntry({self.virtual_page_num}, frame={self.frame}, "
                f"arrival={self.arrival_time}, last_access={self.last_access_time}, "
                f"refs={self.reference_count})")


class PageTable:
    def __init__(self, num_pages=32):
        self.num_pages = num_pages
        self.entries = [PageTableEntry(i) for i in range(num_pages)]

    def __len__(self):
        return self.num_pages

    def get_entry(self, virtual_page_num):
        if not 0 <= virtual_page_num < self.num_pages:
            raise PageIndexError(virtual_page_num, self.num_pages)
        return self.entries[virtual_page_num]

    def load(self, virtual_page_num, frame, now=0):
        """Mark a page resident before a run starts."""
        self.get_entry(virtual_page_num).load(frame, now)

    def resident_entries(self):
        return [entry for entry in self.entries if entry.is_valid()]

    def resident_count(self):
        return len(self.resident_entries())

    def frame_assignment(self):
        return {entry.virtual_page_num: entry.frame for entry in self.resident_entries()}

    def copy(self):
        table = PageTable(0)
        table.num_pages = self.num_pages
        table.entries = [entry.copy() for entry in self.entries]
        return table
