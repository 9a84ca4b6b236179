import sys

import matplotlib
import matplotlib.pyplot as plt

from config import ALGORITHMS
from errors import PageReplacementError
from memory_manager import FramePool
from page_table import PageTable
from simulator import count_page_faults, load_reference_string

# Classic string that shows Belady's anomaly under FIFO
BELADY_REFERENCE_STRING = [1, 2, 3, 4, 1, 2, 5, 1, 2, 3, 4, 5]


def collect_fault_curves(reference_string, frame_counts, algorithms=ALGORITHMS):
    """Page faults for every algorithm at every frame count."""
    num_pages = max(reference_string, default=-1) + 1
    results = {}
    for algorithm in algorithms:
        results[algorithm] = [
            count_page_faults(PageTable(num_pages), reference_string,
                              FramePool(num_frames=num_frames), algorithm)
            for num_frames in frame_counts
        ]
    return results


def plot_fault_curves(frame_counts, results, output='algorithm_comparison.png', show=False):
    fig, ax = plt.subplots(figsize=(8, 5))
    fig.suptitle('Page Replacement Algorithm Comparison', fontsize=14, fontweight='bold')

    for algorithm, faults in results.items():
        ax.plot(frame_counts, faults, marker='o', label=algorithm)

    ax.set_xlabel('Frames')
    ax.set_ylabel('Page Faults')
    ax.set_xticks(list(frame_counts))
    ax.grid(alpha=0.3)
    ax.legend()

    plt.tight_layout()
    plt.savefig(output, dpi=300, bbox_inches='tight')
    if show:
        plt.show()
    plt.close(fig)
    return output


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    try:
        if argv:
            reference_string = load_reference_string(argv[0])
        else:
            reference_string = BELADY_REFERENCE_STRING

        distinct_pages = len(set(reference_string))
        frame_counts = range(1, distinct_pages + 1)

        print("Running simulations...")
        results = collect_fault_curves(reference_string, frame_counts)
    except (OSError, ValueError, PageReplacementError) as e:
        print(f"Error: {e}")
        return 1

    for algorithm, faults in results.items():
        print(f"{algorithm:<6} " + " ".join(f"{f:>3}" for f in faults))

    output = plot_fault_curves(frame_counts, results,
                               show=matplotlib.get_backend().lower() != 'agg')
    print(f"\nGraph saved as '{output}'")
    return 0


if __name__ == '__main__':
    sys.exit(main())
