import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt

from reference_string import MAX_PHYSICAL_FRAMES, VIRTUAL_PAGES, generate_reference_string
from simulator import Policy, fault_curve

# Belady's textbook string, shows the FIFO anomaly between 3 and 4 frames
BELADY_REFERENCE = [1, 2, 3, 4, 1, 2, 5, 1, 2, 3, 4, 5]


def plot_fault_curves(reference_string, output='fault_curves.png', virtual_pages=VIRTUAL_PAGES,
                      max_frames=MAX_PHYSICAL_FRAMES, policies=None):
    policies = [Policy.from_name(p) for p in policies or list(Policy)]
    frame_counts = list(range(1, max_frames + 1))

    fig, ax = plt.subplots(figsize=(8, 5))
    fig.suptitle('Page Faults vs. Physical Frames', fontsize=14, fontweight='bold')

    curves = {}
    for policy in policies:
        faults = fault_curve(reference_string, virtual_pages, max_frames, policy)
        curves[policy] = faults
        ax.plot(frame_counts, faults, marker='o', label=policy.value)

        for x, y in zip(frame_counts, faults):
            ax.annotate(f'{y}', (x, y), textcoords='offset points', xytext=(0, 5),
                        ha='center', fontsize=8)

    ax.set_xlabel('Physical Frames')
    ax.set_ylabel('Page Faults')
    ax.set_xticks(frame_counts)
    ax.grid(axis='y', alpha=0.3)
    ax.legend(frameon=True)

    plt.tight_layout()
    fig.savefig(output, dpi=300, bbox_inches='tight')
    plt.close(fig)
    return curves


def main():
    print("Running simulations...")
    plot_fault_curves(BELADY_REFERENCE, output='belady_comparison.png')
    print("Graph saved as 'belady_comparison.png'")

    random_reference = generate_reference_string(50, seed=2019)
    plot_fault_curves(random_reference, output='random_comparison.png')
    print("Graph saved as 'random_comparison.png'")


if __name__ == '__main__':
    main()
