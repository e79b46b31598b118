from collections import namedtuple


# frame is the slot the referenced page occupies after the step (None when
# there are no physical frames); victim is the evicted page or None.
StepResult = namedtuple('StepResult', ['page', 'fault', 'victim', 'frame'])


class PhysicalMemory:
    def __init__(self, num_frames=3):
        self.num_frames = num_frames
        # Each frame stores a virtual page number or None if free
        self.frames = [None] * num_frames
        # One snapshot of the frame table per completed step
        self.history = []

    def find_free_frame(self):
        for i, frame in enumerate(self.frames):
            if frame is None:
                return i
        return None

    def find_page(self, virtual_page_num):
        for i, frame in enumerate(self.frames):
            if frame == virtual_page_num:
                return i
        return None

    def allocate_frame(self, frame_num, virtual_page_num):
        self.frames[frame_num] = virtual_page_num

    def get_frame_info(self, frame_num):
        return self.frames[frame_num]

    def snapshot(self):
        self.history.append(tuple(self.frames))

    def frames_at(self, step):
        return self.history[step]


class Statistics:
    def __init__(self, page_faults=0, hits=0):
        self.page_faults = page_faults
        self.hits = hits

    @classmethod
    def from_results(cls, results):
        faults = sum(1 for result in results if result.fault)
        return cls(page_faults=faults, hits=len(results) - faults)

    @property
    def references(self):
        return self.page_faults + self.hits

    @property
    def hit_ratio(self):
        if self.references == 0:
            return 0.0
        return self.hits / self.references

    def __eq__(self, other):
        if not isinstance(other, Statistics):
            return NotImplemented
        return (self.page_faults, self.hits) == (other.page_faults, other.hits)

    def __str__(self):
        return (f"Page Faults: {self.page_faults}\n"
                f"Page Hits: {self.hits}\n"
                f"Hit Ratio: {self.hit_ratio:.2%}")
