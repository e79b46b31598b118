UNSET = -1


class PageTableEntry:
    """Usage statistics for one virtual page, read by the eviction policies."""

    def __init__(self, virtual_page_num):
        self.virtual_page_num = virtual_page_num
        self.load_time = UNSET  # For FIFO
        self.next_use = UNSET  # For OPT
        self.last_access_time = UNSET  # For LRU
        self.access_count = 0  # For LFU

    def record_insertion(self, step):
        self.load_time = step

    def record_reference(self, step, recency=True, frequency=True):
        if recency:
            self.last_access_time = step
        if frequency:
            self.access_count += 1

    def set_next_use(self, step):
        self.next_use = step

    def __repr__(self):
        return (f"PageTableEntry(page={self.virtual_page_num}, "
                f"loaded={self.load_time}, next={self.next_use}, "
                f"last={self.last_access_time}, count={self.access_count})")


class PageTable:

    def __init__(self, num_pages=10):
        self.num_pages = num_pages
        self.entries = [PageTableEntry(i) for i in range(num_pages)]

    def get_entry(self, virtual_page_num):
        return self.entries[virtual_page_num]

    def compute_next_uses(self, references, start):
        """
        Set every page's next use to its first occurrence in references[start:],
        or len(references) + 1 when it never occurs again.
        """
        never = len(references) + 1
        for entry in self.entries:
            entry.set_next_use(never)

        # Walk backwards so the earliest occurrence is written last
        for step in range(len(references) - 1, start - 1, -1):
            self.entries[references[step]].set_next_use(step)
