def format_reference_string(reference_string):
    return "Reference String: " + ", ".join(str(page) for page in reference_string)


def format_frames(frames):
    return "[" + ", ".join(str(page) for page in frames if page is not None) + "]"


def format_run(engine):
    """Render every step of the engine's last run, followed by the fault total."""
    lines = [f"*****Simulating {engine.algorithm_name()}*****",
             "",
             format_reference_string(engine.reference_string)]

    for step, result in enumerate(engine.step_results()):
        lines.append("")
        lines.append(f"Iteration {step}: ")
        lines.append(f"Virtual frame called: {result.page}")
        lines.append(format_frames(engine.frames_at(step)))
        lines.append("Page fault: " + ("Yes." if result.fault else "No."))
        lines.append("Victim frame: " + ("None." if result.victim is None else str(result.victim)))

    lines.append("")
    lines.append(f"Total page faults: {engine.total_faults()}")
    lines.append("Simulation finished.")
    return "\n".join(lines)


def format_summary(totals, reference_string=None, physical_frames=None):
    lines = ["=" * 40, "SUMMARY OF ALL RESULTS", "=" * 40]
    if reference_string is not None:
        lines.append(format_reference_string(reference_string))
    if physical_frames is not None:
        lines.append(f"Physical frames: {physical_frames}")

    lines.append(f"{'Algorithm':<10} {'Page Faults':<15}")
    lines.append("-" * 26)
    for policy, faults in totals.items():
        name = getattr(policy, 'value', policy)
        lines.append(f"{name:<10} {faults:<15}")
    return "\n".join(lines)
