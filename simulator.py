import argparse
import sys

from config import (ALGORITHMS, DEFAULT_ALGORITHM, DEFAULT_NUM_FRAMES, DEFAULT_NUM_PAGES,
                    MAX_POOL_SIZE, MAX_REFERENCE_LENGTH, MAX_TABLE_SIZE)
from errors import CapacityExceededError, PageIndexError, PageReplacementError
from memory_manager import FramePool, Statistics
from page_table import PageTable
from policies import get_policy


def process_page_access(page_table, page_number, frame_pool, now, policy):
    """
    Returns the frame backing page_number at time `now`, loading the page
    into a free frame or into a victim's frame if it is not resident.
    """
    policy = get_policy(policy)
    entry = page_table.get_entry(page_number)

    # Hit - the pool is never consulted
    if entry.is_valid():
        return entry.touch(now)

    if not frame_pool.is_empty():
        frame = frame_pool.allocate()
    else:
        victim = policy.select_victim(page_table, page_number)
        frame = victim.evict()

    entry.load(frame, now)
    return frame


def process_page_access_fifo(page_table, page_number, frame_pool, now):
    return process_page_access(page_table, page_number, frame_pool, now, 'FIFO')


def process_page_access_lru(page_table, page_number, frame_pool, now):
    return process_page_access(page_table, page_number, frame_pool, now, 'LRU')


def process_page_access_lfu(page_table, page_number, frame_pool, now):
    return process_page_access(page_table, page_number, frame_pool, now, 'LFU')


class SimulationResult:
    def __init__(self, policy, statistics, page_table, frame_pool):
        self.policy = policy
        self.statistics = statistics
        self.page_table = page_table  # Working copy after the run
        self.frame_pool = frame_pool

    @property
    def page_faults(self):
        return self.statistics.page_faults

    def frame_assignment(self):
        return self.page_table.frame_assignment()


def check_capacity(page_table, reference_string, frame_pool, policy=None,
                   max_table_size=MAX_TABLE_SIZE, max_pool_size=MAX_POOL_SIZE,
                   max_reference_length=MAX_REFERENCE_LENGTH):
    if len(page_table) > max_table_size:
        raise CapacityExceededError('page table', len(page_table), max_table_size, policy)
    if frame_pool.count() > max_pool_size:
        raise CapacityExceededError('frame pool', frame_pool.count(), max_pool_size, policy)
    if len(reference_string) > max_reference_length:
        raise CapacityExceededError('reference string', len(reference_string),
                                    max_reference_length, policy)
    for page_number in reference_string:
        if not 0 <= page_number < len(page_table):
            raise PageIndexError(page_number, len(page_table), policy)


def record_reference(page_table, page_number, frame_pool, now, policy, stats):
    entry = page_table.get_entry(page_number)
    hit = entry.is_valid()
    evicted = frame_pool.is_empty()
    # Called on hits too so the policy's bookkeeping stays current
    frame = process_page_access(page_table, page_number, frame_pool, now, policy)
    if hit:
        stats.record_hit()
    else:
        stats.record_page_fault(evicted=evicted)
    return frame


def simulate(page_table, reference_string, frame_pool, policy=DEFAULT_ALGORITHM, **limits):
    """
    Replays the whole reference string against private copies of the page
    table and frame pool. The caller's table and pool are left untouched;
    the working copies come back on the result.
    """
    policy = get_policy(policy)
    reference_string = list(reference_string)
    check_capacity(page_table, reference_string, frame_pool, policy.name, **limits)

    local_page_table = page_table.copy()
    local_frame_pool = frame_pool.copy()
    stats = Statistics()

    current_timestamp = 1
    try:
        for page_number in reference_string:
            record_reference(local_page_table, page_number, local_frame_pool,
                             current_timestamp, policy, stats)
            current_timestamp += 1
    except PageReplacementError as error:
        if error.policy is None:
            error.policy = policy.name
        raise

    return SimulationResult(policy.name, stats, local_page_table, local_frame_pool)


def count_page_faults(page_table, reference_string, frame_pool, policy=DEFAULT_ALGORITHM,
                      **limits):
    return simulate(page_table, reference_string, frame_pool, policy, **limits).page_faults


def count_page_faults_fifo(page_table, reference_string, frame_pool, **limits):
    return count_page_faults(page_table, reference_string, frame_pool, 'FIFO', **limits)


def count_page_faults_lru(page_table, reference_string, frame_pool, **limits):
    return count_page_faults(page_table, reference_string, frame_pool, 'LRU', **limits)


def count_page_faults_lfu(page_table, reference_string, frame_pool, **limits):
    return count_page_faults(page_table, reference_string, frame_pool, 'LFU', **limits)


def load_reference_string(filename):
    """
    Reads page numbers separated by whitespace or commas. Blank lines and
    anything after a '#' are ignored.
    """
    reference_string = []
    with open(filename, 'r') as f:
        for line_number, line in enumerate(f, 1):
            line = line.split('#', 1)[0]
            for token in line.replace(',', ' ').split():
                try:
                    reference_string.append(int(token))
                except ValueError:
                    raise ValueError(
                        f"{filename}:{line_number}: '{token}' is not a page number") from None
    return reference_string


class VirtualMemorySimulator:

    def __init__(self, algorithm=DEFAULT_ALGORITHM, num_pages=DEFAULT_NUM_PAGES,
                 num_frames=DEFAULT_NUM_FRAMES):
        self.policy = get_policy(algorithm)
        self.algorithm = self.policy.name
        self.page_table = PageTable(num_pages)
        self.frame_pool = FramePool(num_frames=num_frames)
        self.stats = Statistics()
        self.current_time = 0

    def handle_memory_reference(self, page_num):
        now = self.current_time + 1
        try:
            frame = record_reference(self.page_table, page_num, self.frame_pool,
                                     now, self.policy, self.stats)
        except PageReplacementError as error:
            if error.policy is None:
                error.policy = self.algorithm
            raise
        self.current_time = now
        return frame

    def run_simulation(self, references, verbose=False):
        if isinstance(references, str):
            source = references
            references = load_reference_string(references)
        else:
            source = 'reference string'
        references = list(references)
        check_capacity(self.page_table, references, self.frame_pool, self.algorithm)

        if verbose:
            print(f"\n{'='*60}")
            print(f"Running {self.algorithm} algorithm on {source}")
            print(f"{'='*60}")

        for page_num in references:
            frame = self.handle_memory_reference(page_num)
            if verbose:
                print(f"  t={self.current_time:<5} page {page_num:<4} -> frame {frame}")

        if verbose:
            print(f"\nResults:")
            print(self.stats)
            print(f"{'='*60}\n")

        return self.stats


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description='Count page faults for a reference string under FIFO, LRU and LFU.')
    parser.add_argument('tracefile', help='file of page numbers separated by spaces or commas')
    parser.add_argument('-n', '--frames', type=int, default=DEFAULT_NUM_FRAMES,
                        help='number of physical frames owned by the process')
    parser.add_argument('-p', '--pages', type=int, default=None,
                        help='page table size (default: largest page referenced + 1)')
    parser.add_argument('-a', '--algorithm', action='append', type=str.upper,
                        choices=ALGORITHMS, help='algorithm to run, may be repeated')
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    algorithms = args.algorithm or ALGORITHMS

    try:
        reference_string = load_reference_string(args.tracefile)
    except (OSError, ValueError) as e:
        print(f"Error: {e}")
        return 1

    num_pages = args.pages
    if num_pages is None:
        num_pages = max(reference_string, default=-1) + 1

    results = {}
    for algorithm in algorithms:
        try:
            results[algorithm] = simulate(PageTable(num_pages), reference_string,
                                          FramePool(num_frames=args.frames), algorithm)
        except PageReplacementError as e:
            print(f"Error: {e}")
            return 1

    print(f"\nReference string: {len(reference_string)} references, "
          f"{num_pages} pages, {args.frames} frames")
    print(f"{'Algorithm':<10} {'Page Faults':<15} {'Evictions':<15} {'Fault Rate':<15}")
    print("-" * 55)
    for algorithm in algorithms:
        stats = results[algorithm].statistics
        print(f"{algorithm:<10} {stats.page_faults:<15} {stats.evictions:<15} "
              f"{stats.fault_rate():<15.2%}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
