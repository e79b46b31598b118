import argparse
from enum import Enum

from errors import InvalidConfiguration, SimulationNotRun, UnsupportedPolicy
from memory_manager import PhysicalMemory, Statistics, StepResult
from page_table import PageTable
from reference_string import (
    MAX_PHYSICAL_FRAMES,
    VIRTUAL_PAGES,
    generate_reference_string,
    is_integer,
    parse_reference_string,
    validate_reference_string,
)
from report import format_run, format_summary

_POLICY_ALIASES = {
    'OPTIMAL': 'OPT',
    'BELADY': 'OPT',
}


class Policy(Enum):
    FIFO = 'FIFO'
    OPT = 'OPT'
    LRU = 'LRU'
    LFU = 'LFU'

    @classmethod
    def from_name(cls, name):
        if isinstance(name, cls):
            return name
        key = str(name).strip().upper()
        key = _POLICY_ALIASES.get(key, key)
        try:
            return cls[key]
        except KeyError:
            raise UnsupportedPolicy(name) from None


class ReplacementEngine:
    """
    Replays a reference string against a fixed number of physical frames
    under one replacement policy at a time.

    Every call to run() starts from empty frames and fresh page statistics,
    so one engine can be reused across policies.
    """

    def __init__(self, reference_string, physical_frames=3, virtual_pages=VIRTUAL_PAGES):
        if not is_integer(physical_frames) or not is_integer(virtual_pages):
            raise InvalidConfiguration(
                f"Frame and page counts must be integers: {physical_frames!r}, {virtual_pages!r}")
        if physical_frames < 0:
            raise InvalidConfiguration(
                f"Number of physical frames must not be negative: {physical_frames}")
        if virtual_pages < 1:
            raise InvalidConfiguration(
                f"Number of virtual pages must be positive: {virtual_pages}")

        self.reference_string = tuple(validate_reference_string(reference_string, virtual_pages))
        self.physical_frames = physical_frames
        self.virtual_pages = virtual_pages
        self.reset()

    def reset(self):
        self.policy = None
        self.page_table = PageTable(self.virtual_pages)
        self.physical_memory = PhysicalMemory(num_frames=self.physical_frames)
        self.results = []
        self.completed = False

    def run(self, policy):
        # A rejected policy name must leave no results from an earlier run
        self.reset()
        self.policy = Policy.from_name(policy)

        for step, page_num in enumerate(self.reference_string):
            self.results.append(self.handle_memory_reference(step, page_num))
            self.physical_memory.snapshot()

        self.completed = True
        return list(self.results)

    def handle_memory_reference(self, step, page_num):
        entry = self.page_table.get_entry(page_num)

        # Referencing a page counts even when it faults
        if self.policy is Policy.LRU:
            entry.record_reference(step, frequency=False)
        elif self.policy is Policy.LFU:
            entry.record_reference(step, recency=False)

        frame_num = self.physical_memory.find_page(page_num)
        if frame_num is not None:
            return StepResult(page=page_num, fault=False, victim=None, frame=frame_num)

        return self.handle_page_fault(step, page_num)

    def handle_page_fault(self, step, page_num):
        if self.physical_frames == 0:
            return StepResult(page=page_num, fault=True, victim=None, frame=None)

        victim = None
        frame_num = self.physical_memory.find_free_frame()

        if frame_num is None:
            frame_num = self.select_victim_page(step)
            victim = self.physical_memory.get_frame_info(frame_num)

        self.physical_memory.allocate_frame(frame_num, page_num)
        self.page_table.get_entry(page_num).record_insertion(step)

        return StepResult(page=page_num, fault=True, victim=victim, frame=frame_num)

    def select_victim_page(self, step):
        if self.policy is Policy.FIFO:
            return self.select_victim_fifo()
        elif self.policy is Policy.OPT:
            return self.select_victim_optimal(step)
        elif self.policy is Policy.LRU:
            return self.select_victim_lru()
        elif self.policy is Policy.LFU:
            return self.select_victim_lfu()
        else:
            raise UnsupportedPolicy(self.policy)

    def resident_entries(self):
        for frame_num in range(self.physical_memory.num_frames):
            vpage_num = self.physical_memory.get_frame_info(frame_num)
            yield frame_num, self.page_table.get_entry(vpage_num)

    # The scans below use strict comparisons, so the lowest frame wins ties.

    def select_victim_fifo(self):
        oldest_time = float('inf')
        victim_frame = 0

        for frame_num, entry in self.resident_entries():
            if entry.load_time < oldest_time:
                oldest_time = entry.load_time
                victim_frame = frame_num

        return victim_frame

    def select_victim_optimal(self, step):
        """
        Optimal algorithm: Replace the page that will be used furthest in the future
        (or never used again).
        """
        self.page_table.compute_next_uses(self.reference_string, step)

        max_future_time = -1
        victim_frame = 0

        for frame_num, entry in self.resident_entries():
            if entry.next_use > max_future_time:
                max_future_time = entry.next_use
                victim_frame = frame_num

        return victim_frame

    def select_victim_lru(self):
        lru_time = float('inf')
        victim_frame = 0

        for frame_num, entry in self.resident_entries():
            if entry.last_access_time < lru_time:
                lru_time = entry.last_access_time
                victim_frame = frame_num

        return victim_frame

    def select_victim_lfu(self):
        min_count = float('inf')
        victim_frame = 0

        for frame_num, entry in self.resident_entries():
            if entry.access_count < min_count:
                min_count = entry.access_count
                victim_frame = frame_num

        return victim_frame

    def _require_run(self):
        if not self.completed:
            raise SimulationNotRun("No simulation has completed on this engine")

    def step_results(self):
        self._require_run()
        return list(self.results)

    def total_faults(self):
        self._require_run()
        return sum(1 for result in self.results if result.fault)

    def algorithm_name(self):
        self._require_run()
        return self.policy.value

    def frames_at(self, step):
        self._require_run()
        if not 0 <= step < len(self.results):
            raise IndexError(f"Step {step} out of range for {len(self.results)} references")
        return self.physical_memory.frames_at(step)

    def statistics(self):
        self._require_run()
        return Statistics.from_results(self.results)


def compare_policies(reference_string, physical_frames, virtual_pages=VIRTUAL_PAGES, policies=None):
    engine = ReplacementEngine(reference_string, physical_frames, virtual_pages)
    totals = {}
    for policy in policies or list(Policy):
        engine.run(policy)
        totals[engine.policy] = engine.total_faults()
    return totals


def fault_curve(reference_string, virtual_pages=VIRTUAL_PAGES, max_frames=MAX_PHYSICAL_FRAMES, policy=Policy.FIFO):
    """Total faults for every frame count from 1 to max_frames."""
    faults = []
    for frames in range(1, max_frames + 1):
        engine = ReplacementEngine(reference_string, frames, virtual_pages)
        engine.run(policy)
        faults.append(engine.total_faults())
    return faults


def build_parser():
    parser = argparse.ArgumentParser(
        prog='pagesim',
        description='Simulate FIFO, OPT, LRU and LFU page replacement on a reference string.')
    parser.add_argument('-f', '--frames', type=int, default=3,
                        help=f'number of physical frames (1-{MAX_PHYSICAL_FRAMES}, default 3)')

    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument('-r', '--reference',
                        help=f'reference string, pages 0-{VIRTUAL_PAGES - 1} separated by spaces or commas')
    source.add_argument('-g', '--generate', type=int, metavar='LENGTH',
                        help='generate a random reference string of this length')

    parser.add_argument('--seed', type=int, default=None,
                        help='random seed for --generate')
    parser.add_argument('-a', '--algorithm', action='append', default=None,
                        help='algorithm to simulate (FIFO, OPT, LRU, LFU); repeatable, default all')
    parser.add_argument('--summary', action='store_true',
                        help='only print the total page faults per algorithm')
    parser.add_argument('--graph', metavar='PATH', default=None,
                        help='save a plot of page faults against frame count')
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if not 1 <= args.frames <= MAX_PHYSICAL_FRAMES:
        parser.error(f"Number of physical frames must be between 1 and {MAX_PHYSICAL_FRAMES}")

    try:
        if args.reference is not None:
            reference_string = parse_reference_string(args.reference, strict=False)
        else:
            reference_string = generate_reference_string(args.generate, seed=args.seed)
        policies = [Policy.from_name(name) for name in args.algorithm or list(Policy)]
    except (InvalidConfiguration, UnsupportedPolicy) as e:
        parser.error(str(e))

    if args.summary:
        totals = compare_policies(reference_string, args.frames, policies=policies)
    else:
        engine = ReplacementEngine(reference_string, args.frames)
        totals = {}
        for policy in policies:
            engine.run(policy)
            totals[policy] = engine.total_faults()
            print(format_run(engine))

    print(format_summary(totals, reference_string, args.frames))

    if args.graph:
        from generate_graphs import plot_fault_curves
        plot_fault_curves(reference_string, output=args.graph, policies=policies)
        print(f"\nGraph saved as '{args.graph}'")

    return 0


if __name__ == '__main__':
    raise SystemExit(main())
