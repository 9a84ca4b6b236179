class FramePool:
    def __init__(self, frames=None, num_frames=None):
        # Frames owned by the process but not backing any page
        if frames is None:
            frames = range(num_frames or 0)
        self.frames = list(frames)

    def count(self):
        return len(self.frames)

    def is_empty(self):
        return not self.frames

    def allocate(self):
        # Which free frame gets drawn does not matter; take the last one
        return self.frames.pop()

    def copy(self):
        return FramePool(self.frames)

    def __repr__(self):
        return f"FramePool({self.frames})"


class Statistics:
    def __init__(self):
        self.references = 0
        self.hits = 0
        self.page_faults = 0
        self.evictions = 0

    def record_hit(self):
        self.references += 1
        self.hits += 1

    def record_page_fault(self, evicted=False):
        self.references += 1
        self.page_faults += 1
        if evicted:
            # No free frame left: a resident page lost its frame
            self.evictions += 1

    def fault_rate(self):
        if self.references == 0:
            return 0.0
        return self.page_faults / self.references

    def __str__(self):
        return (f"References: {self.references}\n"
                f"Page Faults: {self.page_faults}\n"
                f"Evictions: {self.evictions}\n"
                f"Fault Rate: {self.fault_rate():.2%}")
